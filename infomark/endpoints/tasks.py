from __future__ import annotations

from ..models import GradeResponse, MissingTaskResponse, SheetTaskResponse, TaskRatingResponse, TaskRequest, TaskResponse
from ..results import Result
from .base import Endpoint


class Tasks(Endpoint):
    group = 'tasks'

    async def get_rating(self, token: str, course_id: int, task_id: int) -> Result[TaskRatingResponse]:
        self.not_implemented('get_rating')

    async def rate(self, token: str, course_id: int, task_id: int, rating: int) -> Result[bool]:
        self.not_implemented('rate')

    async def get_public_file(self, token: str, course_id: int, task_id: int) -> bytes:
        self.not_implemented('get_public_file')

    async def upload_public_file(self, token: str, course_id: int, task_id: int, archive: bytes) -> Result[bool]:
        self.not_implemented('upload_public_file')

    async def get_private_file(self, token: str, course_id: int, task_id: int) -> bytes:
        self.not_implemented('get_private_file')

    async def upload_private_file(self, token: str, course_id: int, task_id: int, archive: bytes) -> Result[bool]:
        self.not_implemented('upload_private_file')

    async def get(self, token: str, course_id: int, task_id: int) -> Result[TaskResponse]:
        self.not_implemented('get')

    async def update(self, token: str, course_id: int, task_id: int, task: TaskRequest) -> Result[bool]:
        self.not_implemented('update')

    async def delete(self, token: str, course_id: int, task_id: int) -> Result[bool]:
        self.not_implemented('delete')

    async def missing(self, token: str, course_id: int) -> Result[list[MissingTaskResponse]]:
        self.not_implemented('missing')

    async def result(self, token: str, course_id: int, task_id: int) -> Result[GradeResponse]:
        self.not_implemented('result')

    async def sheet_tasks(self, token: str, course_id: int, sheet_id: int) -> Result[list[SheetTaskResponse]]:
        self.not_implemented('sheet_tasks')

    async def create_sheet_task(self, token: str, course_id: int, sheet_id: int, task: TaskRequest) -> Result[TaskResponse]:
        self.not_implemented('create_sheet_task')


__all__ = ['Tasks']
