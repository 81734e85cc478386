from __future__ import annotations

from typing import Any

from ..models import AccountRequest, CreateUserAccountRequest, ExamEnrollmentResponse, UserResponse
from ..results import Result, interpret_reply
from .base import Endpoint


class Account(Endpoint):
    """Endpoints acting on the account that owns the bearer token."""

    group = 'account'

    async def exam_enrollments(self, token: str) -> Result[list[ExamEnrollmentResponse]]:
        body = await self.transport.get(self.route('account', 'exams', 'enrollments'), token)
        return interpret_reply(body, list[ExamEnrollmentResponse])

    async def get_avatar(self, token: str) -> bytes:
        self.not_implemented('get_avatar')

    async def upload_avatar(self, token: str, image: bytes) -> Result[bool]:
        self.not_implemented('upload_avatar')

    async def delete_avatar(self, token: str) -> Result[bool]:
        self.not_implemented('delete_avatar')

    async def get(self, token: str) -> Result[UserResponse]:
        self.not_implemented('get')

    async def create(self, user: CreateUserAccountRequest) -> Result[UserResponse]:
        self.not_implemented('create')

    # The documented PATCH body is ambiguous.
    async def patch(self, token: str, account: AccountRequest | dict[str, Any]) -> Result[bool]:
        self.not_implemented('patch')


__all__ = ['Account']
