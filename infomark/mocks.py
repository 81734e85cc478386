"""Light-weight helpers to mock an InfoMark server for unit tests."""

from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

import httpx

from .models import AuthResponse, ExamEnrollmentResponse, LoginResponse, Status, TokenValue, VersionResponse


@dataclass(slots=True)
class RecordedCall:
    """Simple container capturing an outgoing request for assertions."""

    method: str
    url: httpx.URL
    headers: httpx.Headers
    content: bytes

    def json(self) -> Any:
        return json.loads(self.content)


def _coerce_body(value: Any) -> tuple[int, bytes]:
    status_code = 200
    payload = value
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], int):
        status_code, payload = value

    if isinstance(payload, str):
        return status_code, payload.encode('utf-8')
    if hasattr(payload, 'model_dump_json'):
        return status_code, payload.model_dump_json(by_alias=True, exclude_none=True).encode('utf-8')
    if isinstance(payload, list):
        items = [json.loads(item.model_dump_json(by_alias=True, exclude_none=True)) if hasattr(item, 'model_dump_json') else item for item in payload]
        return status_code, json.dumps(items).encode('utf-8')
    if isinstance(payload, Mapping):
        return status_code, json.dumps(dict(payload)).encode('utf-8')

    msg = 'Mock bodies must be text, Pydantic models, dicts, lists or (status, body) tuples.'
    raise TypeError(msg)


def create_mock_transport(routes: Mapping[tuple[str, str], Any] | None = None) -> tuple[httpx.MockTransport, list[RecordedCall]]:
    """Create an :class:`httpx.MockTransport` returning canned InfoMark replies.

    ``routes`` maps ``(method, path)`` pairs such as ``('POST', '/api/v1/auth/token')``
    to a reply body.  Unknown routes answer ``404`` with a status payload, the
    way InfoMark itself does.
    """

    responses: MutableMapping[tuple[str, str], tuple[int, bytes]] = {}
    for (method, path), body in (routes or {}).items():
        responses[(method.upper(), path)] = _coerce_body(body)

    calls: list[RecordedCall] = []

    def handler(request: httpx.Request) -> httpx.Response:
        recorded = RecordedCall(method=request.method, url=request.url, headers=httpx.Headers(request.headers), content=request.content)
        calls.append(recorded)

        status_and_body = responses.get((request.method, request.url.path))
        if status_and_body is None:
            return httpx.Response(404, json={'status': 'Not Found'})

        status_code, body = status_and_body
        return httpx.Response(status_code, content=body)

    return httpx.MockTransport(handler), calls


def make_status(status: str = 'Bad Request', error: str | None = None) -> Status:
    return Status(status=status, error=error)


def make_auth_response(*, access: str = 'access-token', refresh: str = 'refresh-token') -> AuthResponse:
    return AuthResponse(access=TokenValue(token=access), refresh=TokenValue(token=refresh))


def make_login_response(*, root: bool = False) -> LoginResponse:
    return LoginResponse(root=root)


def make_version_response(*, commit: str = 'c0ffee', version: str = '0.0.1') -> VersionResponse:
    return VersionResponse(commit=commit, version=version)


def make_exam_enrollment(*, exam_id: int = 1, course_id: int = 1, user_id: int = 1, status: int = 0, mark: str | None = None) -> ExamEnrollmentResponse:
    return ExamEnrollmentResponse(status=status, mark=mark, user_id=user_id, course_id=course_id, exam_id=exam_id)


__all__ = [
    'RecordedCall',
    'create_mock_transport',
    'make_auth_response',
    'make_exam_enrollment',
    'make_login_response',
    'make_status',
    'make_version_response',
]
