from .base import RecordSequence

__all__ = ["RecordSequence"]
