"""Deterministic composition of NTIDs.

Compound IDs give derived entities a stable identity. The like-state of
user A on photo B is always ``Like[User[...],Photo[...]]``, so two clients
creating it independently end up with the same primary key.
"""

from __future__ import annotations

from collections.abc import Iterable

from ntid.types import Ntid


def make_compound_id(type: str, ids: Iterable[str]) -> Ntid:
    """Join ``ids`` in the given order (directed relations: from, then to)."""
    return Ntid(f"{type}[{','.join(ids)}]")


def make_symmetric_id(type: str, ids: Iterable[str]) -> Ntid:
    """Join ``ids`` after sorting them, so any permutation yields the same ID."""
    return Ntid(f"{type}[{','.join(sorted(ids))}]")
