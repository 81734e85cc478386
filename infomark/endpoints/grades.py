from __future__ import annotations

from ..models import GradeRequest, GradeResponse, MissingGradeResponse
from ..results import Result
from .base import Endpoint


class Grades(Endpoint):
    group = 'grades'

    # No conclusive documentation for the summary reply.
    async def summary(self, token: str, course_id: int, group_id: int) -> Result[object]:
        self.not_implemented('summary')

    async def missing(self, token: str, course_id: int) -> Result[list[MissingGradeResponse]]:
        self.not_implemented('missing')

    async def get(self, token: str, course_id: int, grade_id: int) -> Result[GradeResponse]:
        self.not_implemented('get')

    async def update(self, token: str, course_id: int, grade_id: int, grade: GradeRequest) -> Result[bool]:
        self.not_implemented('update')


__all__ = ['Grades']
