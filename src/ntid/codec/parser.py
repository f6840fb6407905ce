"""Splitting an NTID into its type and inner part, and back."""

from __future__ import annotations

import re

from ntid.errors import InvalidFormatError
from ntid.types import Ntid

# First "[" ends the type, the final "]" closes the body. Nested NTIDs inside
# compound bodies are carried through as-is.
_NTID_RE = re.compile(r"([^\[]+)\[(.*)\]", re.DOTALL)


def _split(id: str) -> tuple[str, str]:
    if not isinstance(id, str):
        raise InvalidFormatError(id, f"expected str, got {type(id).__name__}")
    match = _NTID_RE.fullmatch(id)
    if match is None:
        raise InvalidFormatError(id)
    return match.group(1), match.group(2)


def get_type_from_id(id: str) -> str:
    """Return the type tag, e.g. ``"User"`` for ``User[...]``."""
    return _split(id)[0]


def get_inner_part_of_id(id: str) -> str:
    """Return everything between the first ``[`` and the final ``]``."""
    return _split(id)[1]


def reconstruct_id_from_type_and_inner_part(type: str, inner_part: str) -> Ntid:
    return Ntid(f"{type}[{inner_part}]")
