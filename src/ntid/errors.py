"""NTID error hierarchy.

Every codec failure is a ``ValueError`` subclass so callers that already
guard input parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class NtidError(ValueError):
    """Base class for all NTID codec errors."""


class InvalidFormatError(NtidError):
    """A string does not have the ``Type[Body]`` shape."""

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        message = f"{value!r} is not a valid NTID"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class LengthMismatchError(NtidError):
    """Transcoder input has the wrong fixed length."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} must be {expected} long, got {actual}")


class CorruptEncodingError(NtidError):
    """Bytes did not come from ``encode_id_to_bytes`` (non-zero padding sextet)."""


class InternalEncodingError(NtidError, AssertionError):
    """An encode/decode step produced an impossible result. Not recoverable."""
