"""Shared enumerations."""

from enum import Enum, IntFlag


class Sorting(str, Enum):
    """Sort direction requested by a client; ``NONE`` leaves order to the store."""

    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @property
    def description(self) -> str:
        if self is Sorting.NONE:
            return "without sorting"
        return self.value.capitalize()


class ErrorCode(IntFlag):
    """Error classification carried in failure envelopes."""

    NONE = 0
    UNEXPECTED = 1 << 0
    DATABASE_EXCEPTION = 1 << 1
    NOT_FOUND = 1 << 2
