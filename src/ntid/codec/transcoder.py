"""Fixed-width binary form of random NTID bodies.

When the type is known from context (a typed database column, say), only
the 132 random bits need storing. 22 Base64URL characters are 132 bits,
which is not byte-aligned, so one zero sextet is appended before decoding:
23 characters make 138 bits, standard Base64 keeps the first 136 (17 bytes)
and drops the last two, which are zero. The low 4 bits of the final byte
are therefore always zero, and decoding checks that.

Compound bodies are never transcoded; the length check rejects them.
"""

from __future__ import annotations

import base64
import logging

from ntid.codec.alphabet import (
    ALPHABET_SET,
    ENCODED_LENGTH,
    PADDING_CHAR,
    RANDOM_BODY_LENGTH,
)
from ntid.codec.parser import get_inner_part_of_id, reconstruct_id_from_type_and_inner_part
from ntid.errors import (
    CorruptEncodingError,
    InternalEncodingError,
    InvalidFormatError,
    LengthMismatchError,
)
from ntid.types import BytesLike, Ntid

logger = logging.getLogger(__name__)

_URL_TO_STANDARD = str.maketrans("-_", "+/")
_STANDARD_TO_URL = str.maketrans("+/", "-_")


def encode_id_to_bytes(id: str) -> bytes:
    """Pack the random body of ``id`` into 17 bytes.

    Raises:
        InvalidFormatError: ``id`` is not ``Type[Body]`` or the body has
            characters outside the alphabet.
        LengthMismatchError: the body is not 22 characters (e.g. a compound ID).
    """
    inner_part = get_inner_part_of_id(id)
    if len(inner_part) != RANDOM_BODY_LENGTH:
        raise LengthMismatchError(
            "Inner part of NTID", RANDOM_BODY_LENGTH, len(inner_part)
        )

    bad = sorted(set(inner_part) - ALPHABET_SET)
    if bad:
        logger.debug("Rejected NTID body %r with characters %r", inner_part, bad)
        raise InvalidFormatError(id, f"body contains non-Base64URL characters {bad!r}")

    # One "=" completes the final 4-character group (23 + 1 = 24).
    standard = (inner_part + PADDING_CHAR).translate(_URL_TO_STANDARD) + "="
    data = base64.b64decode(standard, validate=True)

    if len(data) != ENCODED_LENGTH:
        raise InternalEncodingError(
            f"Expected {ENCODED_LENGTH} bytes, got {len(data)} bytes"
        )
    return data


def decode_id_from_bytes(type: str, data: BytesLike) -> Ntid:
    """Rebuild ``type[body]`` from the 17 bytes made by :func:`encode_id_to_bytes`.

    Raises:
        LengthMismatchError: ``data`` is not exactly 17 bytes.
        CorruptEncodingError: the trailing padding bits are not zero, so the
            bytes cannot have come from this encoding.
        TypeError: ``data`` is not bytes, bytearray or memoryview.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Encoded NTID must be bytes-like, got {data.__class__.__name__}")
    raw = bytes(data)
    if len(raw) != ENCODED_LENGTH:
        raise LengthMismatchError("Encoded NTID", ENCODED_LENGTH, len(raw))

    text = base64.b64encode(raw).decode("ascii").translate(_STANDARD_TO_URL).rstrip("=")
    if not text.endswith(PADDING_CHAR):
        logger.debug("Corrupt NTID encoding %s (trailing sextet %r)", raw.hex(), text[-1])
        raise CorruptEncodingError(
            f"Last Base64URL character should be {PADDING_CHAR!r} (zero sextet), "
            f"got {text[-1]!r}"
        )
    return reconstruct_id_from_type_and_inner_part(type, text[:-1])
