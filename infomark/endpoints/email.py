from __future__ import annotations

from ..models import EmailRequest
from ..results import Result
from .base import Endpoint


class Email(Endpoint):
    group = 'email'

    async def user_email(self, token: str, user_id: int, message: EmailRequest) -> Result[bool]:
        self.not_implemented('user_email')

    async def group_email(self, token: str, course_id: int, group_id: int, message: EmailRequest) -> Result[bool]:
        self.not_implemented('group_email')

    async def course_email(
        self,
        token: str,
        course_id: int,
        message: EmailRequest,
        *,
        roles: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        subject: str | None = None,
        language: str | None = None,
    ) -> Result[bool]:
        self.not_implemented('course_email')


__all__ = ['Email']
