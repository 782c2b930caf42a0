"""Decoding of Medium's ``data``/``errors`` response envelope.

Every Medium endpoint answers with either ``{"data": {...}}`` or
``{"errors": [{"message": "..."}, ...]}``. There is no explicit tag: the shape
of the body decides which one was returned. :func:`decode_envelope` tries the
success shape first and then the error shape; a body matching neither is a
protocol mismatch rather than an application failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, TypeVar, Union

from markmedium.errors import ApiFailure, ProtocolMismatchError

T = TypeVar("T")

_SHAPE_ERRORS = (KeyError, TypeError, ValueError)


@dataclass(slots=True)
class Success(Generic[T]):
    payload: T


@dataclass(slots=True)
class Failure:
    messages: list[str]

    @property
    def message(self) -> str:
        return self.messages[0]


Envelope = Union[Success[T], Failure]


def decode_envelope(body: Any, parse: Callable[[Mapping[str, Any]], T]) -> Envelope[T]:
    """Interpret ``body`` as a success payload parsed by ``parse`` or as an error list."""
    try:
        return Success(parse(body))
    except _SHAPE_ERRORS:
        pass

    messages = _error_messages(body)
    if messages is None:
        raise ProtocolMismatchError(
            "Unexpected response from Medium",
            details={"body": _preview(body)},
        )
    return Failure(messages)


def unwrap(envelope: Envelope[T]) -> T:
    """Return the success payload or raise the first reported error."""
    if isinstance(envelope, Failure):
        # Medium may report several errors; only the first one is surfaced.
        raise ApiFailure(envelope.message, details={"errors": envelope.messages})
    return envelope.payload


def _error_messages(body: Any) -> list[str] | None:
    if not isinstance(body, Mapping):
        return None
    errors = body.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    messages: list[str] = []
    for item in errors:
        if not isinstance(item, Mapping) or not isinstance(item.get("message"), str):
            return None
        messages.append(item["message"])
    return messages


def _preview(body: Any) -> str:
    return repr(body)[:200]


__all__ = ["Envelope", "Failure", "Success", "decode_envelope", "unwrap"]
