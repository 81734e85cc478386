from __future__ import annotations

from ..models import EmailRequest, UserMeRequest, UserRequest, UserResponse
from ..results import Result
from .base import Endpoint


class Users(Endpoint):
    group = 'users'

    async def list_users(self, token: str) -> Result[list[UserResponse]]:
        self.not_implemented('list_users')

    async def update(self, token: str, user_id: int, user: UserRequest) -> Result[bool]:
        self.not_implemented('update')

    async def delete(self, token: str, user_id: int) -> Result[bool]:
        self.not_implemented('delete')

    async def me(self, token: str) -> Result[UserResponse]:
        self.not_implemented('me')

    async def update_me(self, token: str, user: UserMeRequest) -> Result[bool]:
        self.not_implemented('update_me')

    async def send_email(self, token: str, user_id: int, message: EmailRequest) -> Result[bool]:
        self.not_implemented('send_email')

    # Response format of the avatar endpoint is undocumented.
    async def avatar(self, token: str, user_id: int) -> bytes:
        self.not_implemented('avatar')

    async def find(self, token: str, query: str) -> Result[list[UserResponse]]:
        self.not_implemented('find')


__all__ = ['Users']
