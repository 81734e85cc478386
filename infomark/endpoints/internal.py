from __future__ import annotations

from ..results import Result
from .base import Endpoint


class Internal(Endpoint):
    """Callbacks used by the grading workers to report test results."""

    group = 'internal'

    async def public_result(self, token: str, course_id: int, grade_id: int) -> Result[bool]:
        self.not_implemented('public_result')

    async def private_result(self, token: str, course_id: int, grade_id: int) -> Result[bool]:
        self.not_implemented('private_result')


__all__ = ['Internal']
