from __future__ import annotations

from ..models import PrivacyStatement, VersionResponse
from ..results import Result, interpret_reply
from .base import Endpoint


class Common(Endpoint):
    """Unauthenticated service endpoints."""

    group = 'common'

    async def ping(self) -> str:
        """Return the raw body of ``GET /ping`` (``'pong'`` on a healthy server)."""

        return await self.transport.get(self.route('ping'))

    async def version(self) -> Result[VersionResponse]:
        return interpret_reply(await self.transport.get(self.route('version')), VersionResponse)

    async def privacy_statement(self) -> Result[PrivacyStatement]:
        return interpret_reply(await self.transport.get(self.route('privacy_statement')), PrivacyStatement)


__all__ = ['Common']
