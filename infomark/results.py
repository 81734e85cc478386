"""Two-variant results for InfoMark replies.

InfoMark does not tag its JSON replies: a successful ``POST /auth/token``
returns ``{"access": ..., "refresh": ...}`` while a failed one returns
``{"status": "Not Found"}`` and both arrive as ordinary HTTP bodies.  The
helpers below make the distinction explicit.  A reply is a :class:`Success`
when it carries every required field of the expected schema (or is a JSON
array when a list is expected); it is a :class:`Failure` when it is an object
with a ``status`` field instead.  Anything else raises
:class:`~infomark.errors.InfoMarkParseError`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import InfoMarkParseError
from .models import Status

logger = logging.getLogger(__name__)

PayloadT = TypeVar('PayloadT')


@dataclass(frozen=True, slots=True)
class Success(Generic[PayloadT]):
    """The reply carried the expected payload."""

    value: PayloadT
    ok: Literal[True] = True


@dataclass(frozen=True, slots=True)
class Failure:
    """The reply carried a status payload instead of the expected one."""

    status: Status
    ok: Literal[False] = False

    @property
    def error(self) -> str | None:
        return self.status.error


Result = Success[PayloadT] | Failure


def _required_fields(model: type[BaseModel]) -> set[str]:
    return {info.alias or name for name, info in model.model_fields.items() if info.is_required()}


def _matches_schema(payload: Any, schema: Any) -> bool:
    if get_origin(schema) is list:
        return isinstance(payload, list)
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return isinstance(payload, dict) and _required_fields(schema) <= payload.keys()
    msg = f'Unsupported reply schema {schema!r}.'
    raise TypeError(msg)


def _schema_name(schema: Any) -> str:
    if get_origin(schema) is list:
        (item,) = get_args(schema)
        return f'list[{item.__name__}]'
    return schema.__name__


def parse_json(body: str) -> Any:
    """Decode ``body`` or raise :class:`InfoMarkParseError`."""

    try:
        return json.loads(body)
    except ValueError as exc:
        msg = 'InfoMark response did not contain a valid JSON payload.'
        raise InfoMarkParseError(msg, body) from exc


def interpret_reply(body: str, schema: Any = None, *, empty_is_success: bool = False) -> Result[Any]:
    """Turn a raw response body into a :class:`Success` or a :class:`Failure`.

    ``schema`` is a reply model, ``list[Model]`` or ``None`` for endpoints
    that only ever answer with an empty body on success.  With
    ``empty_is_success`` an empty body resolves to ``Success(True)``.
    """

    if body == '' and empty_is_success:
        return Success(True)

    payload = parse_json(body)

    if schema is not None and _matches_schema(payload, schema):
        try:
            value = TypeAdapter(schema).validate_python(payload)
        except ValidationError as exc:
            msg = f'Unable to validate InfoMark response as {_schema_name(schema)}.'
            raise InfoMarkParseError(msg, body) from exc
        return Success(value)

    if isinstance(payload, dict) and 'status' in payload:
        try:
            return Failure(Status.model_validate(payload))
        except ValidationError as exc:
            msg = 'Unable to validate InfoMark status payload.'
            raise InfoMarkParseError(msg, body) from exc

    expected = _schema_name(schema) if schema is not None else 'an empty body'
    logger.warning('Unrecognised InfoMark reply shape, expected %s', expected)
    msg = f'InfoMark response matched neither {expected} nor a status payload.'
    raise InfoMarkParseError(msg, body)


__all__ = ['Failure', 'Result', 'Success', 'interpret_reply', 'parse_json']
