"""Storage layer - plain data access without business rules."""

from .entry_log import EntryLog

__all__ = ["EntryLog"]
