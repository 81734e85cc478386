"""Exception hierarchy raised by the InfoMark client.

Status payloads sent by the service (``{"status": ..., "error": ...}``) are
*not* exceptions: they come back as :class:`infomark.results.Failure` values.
The classes below cover the cases where no usable reply exists at all.
"""

from __future__ import annotations


class InfoMarkError(RuntimeError):
    """Base error raised for transport, parsing or coverage failures."""


class InfoMarkTransportError(InfoMarkError):
    """The network layer failed before a complete response arrived."""

    def __init__(self, method: str, path: str, message: str | None = None):
        self.method = method
        self.path = path
        super().__init__(message or f'Error communicating with InfoMark while performing {method} {path}')


class InfoMarkParseError(InfoMarkError):
    """A response body could not be interpreted as the expected JSON payload."""

    def __init__(self, message: str, body: str):
        self.body = body
        super().__init__(message)


class InfoMarkNotImplementedError(InfoMarkError, NotImplementedError):
    """The endpoint exists in the InfoMark API but the client does not cover it yet."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f'InfoMark endpoint {endpoint!r} is not implemented by this client.')


__all__ = ['InfoMarkError', 'InfoMarkNotImplementedError', 'InfoMarkParseError', 'InfoMarkTransportError']
