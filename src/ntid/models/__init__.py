"""Typed NTID models."""

from ntid.models.ntid import NtidStr, ParsedNtid, RandomNtidStr

__all__ = [
    "NtidStr",
    "ParsedNtid",
    "RandomNtidStr",
]
