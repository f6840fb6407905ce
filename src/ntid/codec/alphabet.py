"""Fixed design constants shared by the generator and the transcoder."""

from __future__ import annotations

import string

from ntid.errors import InternalEncodingError

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"

# Base64URL (RFC 4648 §5). The transcoder relies on ALPHABET matching it
# symbol for symbol.
BASE64_URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

RANDOM_BODY_LENGTH = 22
RANDOM_SOURCE_BYTES = 32
ENCODED_LENGTH = 17

# Zero sextet, appended before decoding so 22 chars become 17 whole bytes.
PADDING_CHAR = ALPHABET[0]

ALPHABET_SET = frozenset(ALPHABET)

if ALPHABET != BASE64_URL_ALPHABET:
    raise InternalEncodingError(
        "NTID alphabet must match the Base64URL alphabet for byte transcoding"
    )

if 256 % len(ALPHABET) != 0:
    raise InternalEncodingError(
        f"NTID alphabet size {len(ALPHABET)} must divide 256 to avoid modulo bias"
    )


def is_random_body(inner_part: str) -> bool:
    """True if ``inner_part`` looks like a generated (non-compound) body."""
    return len(inner_part) == RANDOM_BODY_LENGTH and ALPHABET_SET.issuperset(inner_part)
