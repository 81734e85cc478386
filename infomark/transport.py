"""Raw HTTP(S) transport shared by every InfoMark endpoint facade.

:class:`Transport` performs exactly one round trip per call and hands the
response body back as text.  It never parses JSON and never looks at the
HTTP status code: InfoMark reports failures inside the body, so a ``403``
whose body reads ``{"status": "Forbidden"}`` is a perfectly good transport
outcome.  Only network-level problems (DNS, refused connections, resets,
TLS failures) surface as :class:`~infomark.errors.InfoMarkTransportError`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

import httpx
from pydantic import BaseModel

from .errors import InfoMarkTransportError

logger = logging.getLogger(__name__)

Scheme = Literal['http', 'https']
Method = Literal['GET', 'POST', 'PUT', 'DELETE']

DEFAULT_USER_AGENT = 'infomark-python'
JSON_CONTENT_TYPE = 'application/json'


@dataclass(frozen=True, slots=True)
class ConnectionTarget:
    """Where requests go.  Fixed for the lifetime of a :class:`Transport`."""

    host: str
    port: int
    scheme: Scheme = 'https'

    def __post_init__(self) -> None:
        if self.scheme not in ('http', 'https'):
            msg = f'Unsupported scheme {self.scheme!r}; expected "http" or "https".'
            raise ValueError(msg)

    @property
    def base_url(self) -> str:
        return f'{self.scheme}://{self.host}:{self.port}'


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Everything needed to issue one request.  Built per call, never reused."""

    path: str
    method: Method = 'GET'
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def __post_init__(self) -> None:
        # Freeze a private copy so later changes to the caller's dict cannot leak in.
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))


def build_headers(token: str | None = None, content_type: str | None = None, content_length: int | None = None) -> dict[str, str]:
    """Return only the headers whose inputs were given."""

    headers: dict[str, str] = {}
    if content_type is not None:
        headers['Content-Type'] = content_type
    if content_length is not None:
        headers['Content-Length'] = str(content_length)
    if token is not None:
        headers['Authorization'] = f'Bearer {token}'
    return headers


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Shallow merge; keys are compared case-sensitively and ``overrides`` win."""

    merged = dict(defaults)
    merged.update(overrides)
    return merged


def serialize_payload(payload: Any) -> bytes:
    """Encode ``payload`` as compact UTF-8 JSON.  Pydantic models are dumped by alias, keeping explicit nulls."""

    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True, exclude_unset=True).encode('utf-8')
    return json.dumps(payload, separators=(',', ':'), ensure_ascii=False).encode('utf-8')


class Transport:
    """Issue single HTTP(S) requests against one InfoMark host.

    One instance is created per client and shared by all facades.  Calls are
    independent of each other, so concurrent use from several tasks is fine.
    No timeout is enforced unless one is passed explicitly.
    """

    def __init__(
        self,
        target: ConnectionTarget,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if http_client is not None and transport is not None:
            msg = 'Pass either `transport` or a pre-configured `http_client`, not both.'
            raise ValueError(msg)

        self._target = target
        self._default_headers = MappingProxyType({'user-agent': user_agent, 'accept': '*/*'})
        self._own_client = http_client is None
        if http_client is None:
            self._client = httpx.AsyncClient(base_url=target.base_url, timeout=timeout, transport=transport)
        else:
            self._client = http_client

    @property
    def target(self) -> ConnectionTarget:
        return self._target

    @property
    def default_headers(self) -> Mapping[str, str]:
        return self._default_headers

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._own_client:
            await self._client.aclose()

    # -- Verbs ----------------------------------------------------------

    async def get(self, path: str, token: str | None = None) -> str:
        return await self.send(RequestDescriptor(path=path, method='GET', headers=build_headers(token=token)))

    async def post(self, path: str, payload: Any, token: str | None = None) -> str:
        return await self._send_json('POST', path, payload, token)

    async def put(self, path: str, payload: Any, token: str | None = None) -> str:
        return await self._send_json('PUT', path, payload, token)

    async def delete(self, path: str, token: str) -> str:
        headers = build_headers(token=token, content_type=JSON_CONTENT_TYPE)
        return await self.send(RequestDescriptor(path=path, method='DELETE', headers=headers))

    # -- Round trip -----------------------------------------------------

    async def send(self, descriptor: RequestDescriptor) -> str:
        """Perform the round trip described by ``descriptor`` and return the whole body."""

        headers = merge_headers(self._default_headers, descriptor.headers)
        try:
            response = await self._client.request(
                descriptor.method,
                descriptor.path,
                headers=headers,
                content=descriptor.body,
            )
        except httpx.HTTPError as exc:  # Network / protocol problems
            logger.warning('InfoMark %s %s failed: %s', descriptor.method, descriptor.path, exc)
            raise InfoMarkTransportError(descriptor.method, descriptor.path) from exc

        logger.debug('InfoMark %s %s -> %s (%d bytes)', descriptor.method, descriptor.path, response.status_code, len(response.content))
        return response.text

    async def _send_json(self, method: Method, path: str, payload: Any, token: str | None) -> str:
        body = serialize_payload(payload)
        headers = build_headers(token=token, content_type=JSON_CONTENT_TYPE, content_length=len(body))
        return await self.send(RequestDescriptor(path=path, method=method, headers=headers, body=body))


__all__ = [
    'ConnectionTarget',
    'DEFAULT_USER_AGENT',
    'JSON_CONTENT_TYPE',
    'Method',
    'RequestDescriptor',
    'Scheme',
    'Transport',
    'build_headers',
    'merge_headers',
    'serialize_payload',
]
