from __future__ import annotations

from ..models import SubmissionResponse
from ..results import Result
from .base import Endpoint


class Submissions(Endpoint):
    group = 'submissions'

    async def list_submissions(
        self,
        token: str,
        course_id: int,
        *,
        sheet_id: int | None = None,
        task_id: int | None = None,
        group_id: int | None = None,
        user_id: int | None = None,
    ) -> Result[list[SubmissionResponse]]:
        self.not_implemented('list_submissions')

    async def group_task(self, token: str, course_id: int, task_id: int, group_id: int) -> bytes:
        self.not_implemented('group_task')

    async def group_task_file(self, token: str, course_id: int, task_id: int, group_id: int) -> bytes:
        self.not_implemented('group_task_file')

    async def file(self, token: str, course_id: int, submission_id: int) -> bytes:
        self.not_implemented('file')

    async def get(self, token: str, course_id: int, task_id: int) -> bytes:
        self.not_implemented('get')

    async def upload(self, token: str, course_id: int, task_id: int, archive: bytes) -> Result[bool]:
        self.not_implemented('upload')


__all__ = ['Submissions']
