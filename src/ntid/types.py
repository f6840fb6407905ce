"""Runtime-free type tags for NTIDs.

An NTID is a plain ``str`` at runtime. ``Ntid`` only exists for static type
checkers, so a user ID cannot be passed where an arbitrary string is expected
without a deliberate cast.
"""

from __future__ import annotations

from typing import NewType, Union

Ntid = NewType("Ntid", str)

BytesLike = Union[bytes, bytearray, memoryview]
