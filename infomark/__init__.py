"""Typed asynchronous client for the InfoMark course-management REST API."""

from .client import InfoMarkClient
from .config import Settings
from .errors import InfoMarkError, InfoMarkNotImplementedError, InfoMarkParseError, InfoMarkTransportError
from .mocks import (
    RecordedCall,
    create_mock_transport,
    make_auth_response,
    make_exam_enrollment,
    make_login_response,
    make_status,
    make_version_response,
)
from .models import (
    AuthResponse,
    ExamEnrollmentResponse,
    GroupBidsResponse,
    LoginResponse,
    PrivacyStatement,
    Status,
    VersionResponse,
)
from .results import Failure, Result, Success, interpret_reply
from .routes import build_route
from .transport import ConnectionTarget, RequestDescriptor, Transport, build_headers, merge_headers

__all__ = [
    'AuthResponse',
    'ConnectionTarget',
    'ExamEnrollmentResponse',
    'Failure',
    'GroupBidsResponse',
    'InfoMarkClient',
    'InfoMarkError',
    'InfoMarkNotImplementedError',
    'InfoMarkParseError',
    'InfoMarkTransportError',
    'LoginResponse',
    'PrivacyStatement',
    'RecordedCall',
    'RequestDescriptor',
    'Result',
    'Settings',
    'Status',
    'Success',
    'Transport',
    'VersionResponse',
    'build_headers',
    'build_route',
    'create_mock_transport',
    'interpret_reply',
    'make_auth_response',
    'make_exam_enrollment',
    'make_login_response',
    'make_status',
    'make_version_response',
    'merge_headers',
]
