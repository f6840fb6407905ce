"""Random NTID generation."""

from __future__ import annotations

import logging
import secrets

from ntid.codec.alphabet import ALPHABET, RANDOM_BODY_LENGTH, RANDOM_SOURCE_BYTES
from ntid.types import Ntid

logger = logging.getLogger(__name__)


def make_id(type: str) -> Ntid:
    """Generate a new random NTID, e.g. ``User[MZlL-RDgaMn05ebg3iyTt8]``.

    The body is 22 characters of 6 bits each (132 bits). ``type`` is not
    validated; callers must keep ``[`` out of it or parsing will break.
    """
    raw = secrets.token_bytes(RANDOM_SOURCE_BYTES)
    body = "".join(ALPHABET[b % len(ALPHABET)] for b in raw[:RANDOM_BODY_LENGTH])
    ntid = Ntid(f"{type}[{body}]")
    logger.debug("Generated NTID %s", ntid)
    return ntid
