from __future__ import annotations

from ..models import ExamEnrollmentResponse, ExamRequest, ExamResponse, UserExamRequest
from ..results import Result
from .base import Endpoint


class Exams(Endpoint):
    group = 'exams'

    async def list_exams(self, token: str, course_id: int) -> Result[list[ExamResponse]]:
        self.not_implemented('list_exams')

    async def create(self, token: str, course_id: int, exam: ExamRequest) -> Result[ExamResponse]:
        self.not_implemented('create')

    async def update(self, token: str, course_id: int, exam_id: int, exam: ExamRequest) -> Result[bool]:
        self.not_implemented('update')

    async def delete(self, token: str, course_id: int, exam_id: int) -> Result[bool]:
        self.not_implemented('delete')

    async def enrollments(self, token: str, course_id: int, exam_id: int) -> Result[list[ExamEnrollmentResponse]]:
        self.not_implemented('enrollments')

    async def enroll(self, token: str, course_id: int, exam_id: int) -> Result[bool]:
        self.not_implemented('enroll')

    async def update_enrollment(self, token: str, course_id: int, exam_id: int, enrollment: UserExamRequest) -> Result[bool]:
        self.not_implemented('update_enrollment')

    async def unenroll(self, token: str, course_id: int, exam_id: int) -> Result[bool]:
        self.not_implemented('unenroll')


__all__ = ['Exams']
