"""NTID: typed, composable, generate-anywhere identifiers.

NTIDs look like ``User[MZlL-RDgaMn05ebg3iyTt8]``. The type tag keeps a user
ID from being mixed up with a photo ID, the random body makes them safe to
mint on any client, and compound IDs such as
``Like[Photo[...],User[...]]`` give derived entities a deterministic key.
"""

from ntid.codec import (
    decode_id_from_bytes,
    encode_id_to_bytes,
    get_inner_part_of_id,
    get_type_from_id,
    make_compound_id,
    make_id,
    make_symmetric_id,
    reconstruct_id_from_type_and_inner_part,
)
from ntid.errors import (
    CorruptEncodingError,
    InternalEncodingError,
    InvalidFormatError,
    LengthMismatchError,
    NtidError,
)
from ntid.types import Ntid

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Ntid",
    "make_id",
    "make_compound_id",
    "make_symmetric_id",
    "get_type_from_id",
    "get_inner_part_of_id",
    "reconstruct_id_from_type_and_inner_part",
    "encode_id_to_bytes",
    "decode_id_from_bytes",
    "NtidError",
    "InvalidFormatError",
    "LengthMismatchError",
    "CorruptEncodingError",
    "InternalEncodingError",
]
