from __future__ import annotations

from collections.abc import Iterable

DEFAULT_API_VERSION = 'v1'


def build_route(segments: Iterable[str | int], api_version: str = DEFAULT_API_VERSION) -> str:
    """Join ``segments`` into ``/api/<version>/<seg1>/.../<segN>``.

    Segments are used verbatim: no escaping, no normalisation.  Identifiers
    may be passed as integers and are converted with ``str``.
    """

    return f'/api/{api_version}/' + '/'.join(str(segment) for segment in segments)


__all__ = ['DEFAULT_API_VERSION', 'build_route']
