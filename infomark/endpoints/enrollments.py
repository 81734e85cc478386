from __future__ import annotations

from typing import Any

from ..models import ChangeRoleInCourseRequest, EnrollmentResponse
from ..results import Result
from .base import Endpoint


class Enrollments(Endpoint):
    group = 'enrollments'

    async def group_enrollments(self, token: str, course_id: int, group_id: int) -> Result[list[EnrollmentResponse]]:
        self.not_implemented('group_enrollments')

    async def list_enrollments(
        self,
        token: str,
        course_id: int,
        *,
        roles: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        subject: str | None = None,
        language: str | None = None,
    ) -> Result[list[EnrollmentResponse]]:
        self.not_implemented('list_enrollments')

    async def update(self, token: str, course_id: int, user_id: int, role: ChangeRoleInCourseRequest) -> Result[bool]:
        self.not_implemented('update')

    # The request body of this endpoint is not documented.
    async def create(self, token: str, course_id: int, data: dict[str, Any]) -> Result[bool]:
        self.not_implemented('create')

    async def delete(self, token: str, course_id: int, user_id: int) -> Result[bool]:
        self.not_implemented('delete')


__all__ = ['Enrollments']
