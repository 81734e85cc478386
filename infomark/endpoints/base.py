from __future__ import annotations

from typing import NoReturn

from ..errors import InfoMarkNotImplementedError
from ..routes import DEFAULT_API_VERSION, build_route
from ..transport import Transport


class Endpoint:
    """Common plumbing for a group of InfoMark endpoints.

    Facades hold a reference to the client's shared :class:`Transport` and
    nothing else: every method is independent and the caller threads the
    bearer token through explicitly.
    """

    #: Resource group name used in error messages, e.g. ``'courses'``.
    group = ''

    def __init__(self, transport: Transport, *, api_version: str = DEFAULT_API_VERSION) -> None:
        self._transport = transport
        self._api_version = api_version

    @property
    def transport(self) -> Transport:
        return self._transport

    def route(self, *segments: str | int) -> str:
        return build_route(segments, self._api_version)

    def not_implemented(self, operation: str) -> NoReturn:
        raise InfoMarkNotImplementedError(f'{self.group}.{operation}')


__all__ = ['Endpoint']
