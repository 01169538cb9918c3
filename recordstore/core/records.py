"""
Record helpers shared by every store variant.

A record is anything carrying an ``id``: a mapping with an ``"id"`` key, or an
object with an ``id`` attribute (dataclass, named tuple, pydantic model...).
Nothing else about a record is inspected.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Tuple
import logging

from pydantic import BaseModel, ConfigDict

from recordstore.core.exceptions import InvalidRecordError


logger = logging.getLogger(__name__)


class _Missing:
    """Marker for a record that exposes no identifier."""

    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


def record_id(record: Any) -> Any:
    """Return the record's identifier, or ``MISSING`` when it has none."""
    if isinstance(record, Mapping):
        return record.get("id", MISSING)
    return getattr(record, "id", MISSING)


def has_id(record: Any) -> bool:
    return record_id(record) is not MISSING


def matches(record: Any, identifier: Any) -> bool:
    """True when the record's identifier equals ``identifier``."""
    candidate = record_id(record)
    return candidate is not MISSING and candidate == identifier


def validate_record(record: Any) -> None:
    """Raise ``InvalidRecordError`` if the record has no identifier."""
    if not has_id(record):
        logger.error(f"Rejected record without an id: {record!r}")
        raise InvalidRecordError(record)


class Record(BaseModel):
    """
    Convenience record model.

    Only ``id`` is declared; any other keyword becomes part of the payload.
    """

    model_config = ConfigDict(extra="allow")

    id: Any


class RecordStore(Protocol):
    """The operations every store variant exposes."""

    def add(self, item: Any) -> None: ...

    def get(self, id: Any) -> Optional[Any]: ...

    def count(self) -> int: ...

    def snapshot(self) -> Tuple[Any, ...]: ...


@dataclass(frozen=True)
class RecordStoreOps:
    """
    Immutable bundle of store operations.

    Holds only the callables, never the records themselves, so whatever
    sequence the callables close over stays out of reach of the caller.
    """

    add: Callable[[Any], None]
    get: Callable[[Any], Optional[Any]]
    count: Callable[[], int]
    snapshot: Callable[[], Tuple[Any, ...]]
