"""Entry point of the InfoMark client.

:class:`InfoMarkClient` owns the single :class:`~infomark.transport.Transport`
and hands it to one facade per resource group::

    async with InfoMarkClient('infomark.example.org', 443) as infomark:
        reply = await infomark.auth.token('jane@example.org', 'secret')
        if reply.ok:
            enrollments = await infomark.account.exam_enrollments(reply.value.access.token)

Nothing else is shared between calls, so one client may serve many
concurrent tasks.
"""

from __future__ import annotations

import httpx

from .config import Settings
from .endpoints import (
    Account,
    Auth,
    Common,
    Courses,
    Email,
    Enrollments,
    Exams,
    Grades,
    Groups,
    Internal,
    Materials,
    Sheets,
    Submissions,
    Tasks,
    Users,
)
from .routes import DEFAULT_API_VERSION
from .transport import DEFAULT_USER_AGENT, ConnectionTarget, Transport


class InfoMarkClient:
    """Typed facade over the InfoMark REST API."""

    def __init__(
        self,
        host: str,
        port: int,
        ssl: bool = True,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | httpx.Timeout | None = None,
        api_version: str = DEFAULT_API_VERSION,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        target = ConnectionTarget(host=host, port=port, scheme='https' if ssl else 'http')
        self.transport = Transport(target, user_agent=user_agent, timeout=timeout, transport=transport, http_client=http_client)

        self.common = Common(self.transport, api_version=api_version)
        self.auth = Auth(self.transport, api_version=api_version)
        self.account = Account(self.transport, api_version=api_version)
        self.email = Email(self.transport, api_version=api_version)
        self.users = Users(self.transport, api_version=api_version)
        self.courses = Courses(self.transport, api_version=api_version)
        self.sheets = Sheets(self.transport, api_version=api_version)
        self.tasks = Tasks(self.transport, api_version=api_version)
        self.submissions = Submissions(self.transport, api_version=api_version)
        self.grades = Grades(self.transport, api_version=api_version)
        self.groups = Groups(self.transport, api_version=api_version)
        self.enrollments = Enrollments(self.transport, api_version=api_version)
        self.materials = Materials(self.transport, api_version=api_version)
        self.internal = Internal(self.transport, api_version=api_version)
        self.exams = Exams(self.transport, api_version=api_version)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs) -> InfoMarkClient:
        settings = settings or Settings()
        return cls(
            settings.host,
            settings.port,
            settings.ssl,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            api_version=settings.api_version,
            **kwargs,
        )

    @property
    def target(self) -> ConnectionTarget:
        return self.transport.target

    async def __aenter__(self) -> InfoMarkClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()


__all__ = ['InfoMarkClient']
