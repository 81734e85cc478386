"""Pydantic models describing the InfoMark REST payloads.

Field names follow the wire format documented in the InfoMark Swagger
description (https://infomark.org/swagger/).  Reply models ignore unknown
fields because the service adds attributes between releases; request models
forbid them so typos fail before a request is sent.

The service never tags its replies, so the client tells a success payload
from a :class:`Status` payload by checking which required fields are
present (see :func:`infomark.results.interpret_reply`).  Keep fields that are
not guaranteed by the service optional, otherwise valid replies would be
mistaken for unknown shapes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# -- Shared scalar aliases --------------------------------------------------
ObjectId = Annotated[int, Field(ge=0, description='64-bit identifier assigned by InfoMark.')]
Bid = Annotated[int, Field(ge=0, le=10, description='Preference for a group, 0 (never) to 10 (favourite).')]
Semester = Annotated[int, Field(ge=1, description='Study semester, starting at 1.')]
LanguageCode = Annotated[str, Field(min_length=2, max_length=2, description='Two-letter language code.')]


class InfoMarkReplyModel(BaseModel):
    """Base class for payloads received from InfoMark."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True)


class InfoMarkRequestModel(BaseModel):
    """Base class for payloads sent to InfoMark."""

    model_config = ConfigDict(extra='forbid', populate_by_name=True)


# -- Status -----------------------------------------------------------------


class Status(InfoMarkReplyModel):
    """Failure descriptor returned in place of the expected payload."""

    status: Annotated[str, Field(description='HTTP reason phrase, e.g. "Forbidden" or "Bad Request".')]
    error: Annotated[str | None, Field(description='Optional human-readable explanation.')] = None


# -- Requests ---------------------------------------------------------------


class LoginRequest(InfoMarkRequestModel):
    email: str
    plain_password: str


class ResetPasswordRequest(InfoMarkRequestModel):
    email: str


class UpdatePasswordRequest(InfoMarkRequestModel):
    email: str
    reset_password_token: str
    plain_password: str


class ConfirmEmailRequest(InfoMarkRequestModel):
    email: str
    confirmation_token: str


class UserRequest(InfoMarkRequestModel):
    first_name: str
    last_name: str
    email: str
    student_number: str
    semester: Semester
    subject: str
    language: LanguageCode
    plain_password: str


class UserMeRequest(InfoMarkRequestModel):
    first_name: str
    last_name: str
    student_number: str
    semester: Semester
    subject: str
    language: LanguageCode


class AccountUserData(InfoMarkRequestModel):
    first_name: str
    last_name: str
    email: str
    student_number: str
    semester: Semester
    subject: str
    language: LanguageCode


class CreateUserAccountRequest(InfoMarkRequestModel):
    user: AccountUserData
    account: LoginRequest


class AccountRequest(InfoMarkRequestModel):
    account: LoginRequest
    old_plain_password: str


class EmailRequest(InfoMarkRequestModel):
    subject: str
    body: str


class CourseRequest(InfoMarkRequestModel):
    name: str
    description: str
    begins_at: datetime
    ends_at: datetime
    required_percentage: int


class ChangeRoleInCourseRequest(InfoMarkRequestModel):
    role: int


class SheetRequest(InfoMarkRequestModel):
    name: str
    publish_at: datetime
    due_at: datetime


class TaskRequest(InfoMarkRequestModel):
    max_points: int
    name: str
    public_docker_image: str
    private_docker_image: str


class TaskRatingRequest(InfoMarkRequestModel):
    rating: int


class GradeRequest(InfoMarkRequestModel):
    acquired_points: int
    feedback: str


class TutorReference(InfoMarkRequestModel):
    id: ObjectId


class GroupRequest(InfoMarkRequestModel):
    tutor: TutorReference
    description: str


class GroupBidRequest(InfoMarkRequestModel):
    bid: Bid


class GroupEnrollmentRequest(InfoMarkRequestModel):
    user_id: ObjectId


class MaterialRequest(InfoMarkRequestModel):
    name: str
    kind: int
    publish_at: datetime
    lecture_at: datetime
    required_role: int


class ExamRequest(InfoMarkRequestModel):
    name: str
    description: str
    exam_time: datetime


class UserExamRequest(InfoMarkRequestModel):
    status: int
    mark: str
    user_id: ObjectId


# -- Replies ----------------------------------------------------------------


class VersionResponse(InfoMarkReplyModel):
    """Build information reported by ``GET /version``."""

    commit: str
    version: str


class PrivacyStatement(InfoMarkReplyModel):
    text: str


class TokenValue(InfoMarkReplyModel):
    token: str


class AuthResponse(InfoMarkReplyModel):
    """Access and refresh JWTs issued by ``POST /auth/token``."""

    access: TokenValue
    refresh: TokenValue


class LoginResponse(InfoMarkReplyModel):
    """Reply of ``POST /auth/sessions``; the session itself travels in a cookie."""

    root: bool


class UserShort(InfoMarkReplyModel):
    id: ObjectId
    first_name: str
    last_name: str
    email: str


class UserResponse(InfoMarkReplyModel):
    id: ObjectId
    first_name: str
    last_name: str
    email: str
    avatar_url: str | None = None
    student_number: str | None = None
    semester: int | None = None
    subject: str | None = None
    language: str | None = None
    root: bool = False


class EnrolledUser(InfoMarkReplyModel):
    id: ObjectId
    first_name: str
    last_name: str
    email: str
    avatar_url: str | None = None
    student_number: str | None = None
    semester: int | None = None
    subject: str | None = None
    language: str | None = None


class Tutor(EnrolledUser):
    root: bool = False


class CourseResponse(InfoMarkReplyModel):
    id: ObjectId
    name: str
    description: str | None = None
    begins_at: datetime | None = None
    ends_at: datetime | None = None
    required_percentage: int | None = None


class SheetResponse(InfoMarkReplyModel):
    id: ObjectId
    name: str
    file_url: str | None = None
    publish_at: datetime | None = None
    due_at: datetime | None = None


class SheetPointsResponse(InfoMarkReplyModel):
    acquired_points: int
    max_points: int
    sheet_id: ObjectId


class TaskResponse(InfoMarkReplyModel):
    id: ObjectId
    name: str
    max_points: int
    public_docker_image: str | None = None
    private_docker_image: str | None = None


class TaskPointsResponse(InfoMarkReplyModel):
    acquired_points: int
    max_points: int
    task_id: ObjectId


class SheetTaskResponse(InfoMarkReplyModel):
    """Task summary listed under ``/courses/{id}/sheets/{id}/tasks``."""

    id: ObjectId
    name: str
    max_points: int


class TaskRatingResponse(InfoMarkReplyModel):
    task_id: ObjectId
    average_rating: float
    own_rating: int


class MissingTaskResponse(InfoMarkReplyModel):
    task: TaskResponse
    course_id: ObjectId
    sheet_id: ObjectId


class SubmissionResponse(InfoMarkReplyModel):
    id: ObjectId
    user_id: ObjectId
    task_id: ObjectId
    file_url: str | None = None


class GradeResponse(InfoMarkReplyModel):
    id: ObjectId
    submission_id: ObjectId
    public_execution_state: int | None = None
    private_execution_state: int | None = None
    public_test_log: str | None = None
    private_test_log: str | None = None
    public_test_status: int | None = None
    private_test_status: int | None = None
    acquired_points: int | None = None
    feedback: str | None = None
    tutor_id: ObjectId | None = None
    file_url: str | None = None
    user: UserShort | None = None


class MissingGradeResponse(InfoMarkReplyModel):
    grade: GradeResponse
    course_id: ObjectId
    sheet_id: ObjectId
    task_id: ObjectId


class GroupResponse(InfoMarkReplyModel):
    id: ObjectId
    course_id: ObjectId
    description: str | None = None
    tutor: Tutor | None = None


class GroupBidResponse(InfoMarkReplyModel):
    bid: Bid


class GroupBidsResponse(InfoMarkReplyModel):
    id: ObjectId
    user_id: ObjectId
    group_id: ObjectId
    bid: Bid


class EnrollmentResponse(InfoMarkReplyModel):
    role: int
    user: EnrolledUser


class UserEnrollmentResponse(InfoMarkReplyModel):
    id: ObjectId
    course_id: ObjectId
    role: int


class MaterialResponse(InfoMarkReplyModel):
    id: ObjectId
    name: str
    file_url: str | None = None
    kind: int | None = None
    publish_at: datetime | None = None
    lecture_at: datetime | None = None
    required_role: int | None = None


class ExamResponse(InfoMarkReplyModel):
    id: ObjectId
    name: str
    course_id: ObjectId
    description: str | None = None
    exam_time: datetime | None = None


class ExamEnrollmentResponse(InfoMarkReplyModel):
    status: int
    user_id: ObjectId
    course_id: ObjectId
    exam_id: ObjectId
    mark: str | None = None


__all__ = [
    'AccountRequest',
    'AccountUserData',
    'AuthResponse',
    'Bid',
    'ChangeRoleInCourseRequest',
    'ConfirmEmailRequest',
    'CourseRequest',
    'CourseResponse',
    'CreateUserAccountRequest',
    'EmailRequest',
    'EnrolledUser',
    'EnrollmentResponse',
    'ExamEnrollmentResponse',
    'ExamRequest',
    'ExamResponse',
    'GradeRequest',
    'GradeResponse',
    'GroupBidRequest',
    'GroupBidResponse',
    'GroupBidsResponse',
    'GroupEnrollmentRequest',
    'GroupRequest',
    'GroupResponse',
    'InfoMarkReplyModel',
    'InfoMarkRequestModel',
    'LoginRequest',
    'LoginResponse',
    'MaterialRequest',
    'MaterialResponse',
    'MissingGradeResponse',
    'MissingTaskResponse',
    'ObjectId',
    'PrivacyStatement',
    'ResetPasswordRequest',
    'SheetPointsResponse',
    'SheetRequest',
    'SheetResponse',
    'SheetTaskResponse',
    'Status',
    'SubmissionResponse',
    'TaskPointsResponse',
    'TaskRatingRequest',
    'TaskRatingResponse',
    'TaskRequest',
    'TaskResponse',
    'TokenValue',
    'Tutor',
    'TutorReference',
    'UpdatePasswordRequest',
    'UserEnrollmentResponse',
    'UserExamRequest',
    'UserMeRequest',
    'UserRequest',
    'UserResponse',
    'UserShort',
]
