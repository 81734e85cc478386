from __future__ import annotations

from ..models import CourseRequest, CourseResponse, GroupBidsResponse, SheetPointsResponse
from ..results import Result, interpret_reply
from .base import Endpoint


class Courses(Endpoint):
    group = 'courses'

    async def bids(self, token: str, course_id: int) -> Result[list[GroupBidsResponse]]:
        """List the group bids placed in a course."""

        body = await self.transport.get(self.route('courses', course_id, 'bids'), token)
        return interpret_reply(body, list[GroupBidsResponse])

    async def points(self, token: str, course_id: int) -> Result[list[SheetPointsResponse]]:
        self.not_implemented('points')

    async def list_courses(self, token: str) -> Result[list[CourseResponse]]:
        self.not_implemented('list_courses')

    async def get(self, token: str, course_id: int) -> Result[CourseResponse]:
        self.not_implemented('get')

    async def create(self, token: str, course: CourseRequest) -> Result[CourseResponse]:
        self.not_implemented('create')

    async def update(self, token: str, course_id: int, course: CourseRequest) -> Result[bool]:
        self.not_implemented('update')

    async def delete(self, token: str, course_id: int) -> Result[bool]:
        self.not_implemented('delete')


__all__ = ['Courses']
