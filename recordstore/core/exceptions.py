"""Exceptions raised by the record stores."""


class RecordStoreError(Exception):
    """Base class for every error raised by this package."""


class FrozenStoreError(RecordStoreError, AttributeError):
    """Raised when code tries to rebind or delete part of a frozen store."""


class InvalidRecordError(RecordStoreError, ValueError):
    """Raised in strict mode when a record carries no ``id``."""

    def __init__(self, record):
        self.record = record
        super().__init__(f"Record {record!r} has no 'id' field")
