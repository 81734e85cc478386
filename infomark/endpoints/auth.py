"""Authentication endpoints.

InfoMark offers two login flavours: ``/auth/token`` issues JWTs for API
clients, ``/auth/sessions`` opens a cookie session for the web UI.  Tokens are
returned to the caller and never kept here; pass ``reply.value.access.token``
to every call that needs authorization.
"""

from __future__ import annotations

from ..models import (
    AuthResponse,
    ConfirmEmailRequest,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    UpdatePasswordRequest,
)
from ..results import Result, interpret_reply
from .base import Endpoint


class Auth(Endpoint):
    group = 'auth'

    async def create_session(self, email: str, password: str) -> Result[LoginResponse]:
        payload = LoginRequest(email=email, plain_password=password)
        return interpret_reply(await self.transport.post(self.route('auth', 'sessions'), payload), LoginResponse)

    async def delete_session(self, token: str) -> Result[bool]:
        """Log out.  An empty reply means the session was closed."""

        body = await self.transport.delete(self.route('auth', 'sessions'), token)
        return interpret_reply(body, empty_is_success=True)

    async def token(self, email: str, password: str) -> Result[AuthResponse]:
        payload = LoginRequest(email=email, plain_password=password)
        return interpret_reply(await self.transport.post(self.route('auth', 'token'), payload), AuthResponse)

    async def request_password_reset(self, email: str) -> Result[bool]:
        body = await self.transport.post(self.route('auth', 'request_password_reset'), ResetPasswordRequest(email=email))
        return interpret_reply(body, empty_is_success=True)

    async def confirm_email(self, email: str, confirmation_token: str) -> Result[bool]:
        payload = ConfirmEmailRequest(email=email, confirmation_token=confirmation_token)
        return interpret_reply(await self.transport.post(self.route('auth', 'confirm_email'), payload), empty_is_success=True)

    async def update_password(self, email: str, new_password: str, reset_password_token: str) -> Result[bool]:
        payload = UpdatePasswordRequest(email=email, plain_password=new_password, reset_password_token=reset_password_token)
        return interpret_reply(await self.transport.post(self.route('auth', 'update_password'), payload), empty_is_success=True)


__all__ = ['Auth']
