"""The NTID codec: generate, compose, parse and transcode identifiers.

- generator: random IDs, ``Type[22 chars]``
- composer: ordered and symmetric compound IDs
- parser: type / inner part split and reconstruction
- transcoder: 22-char random body <-> 17 bytes
"""

from ntid.codec.generator import make_id
from ntid.codec.composer import make_compound_id, make_symmetric_id
from ntid.codec.parser import (
    get_inner_part_of_id,
    get_type_from_id,
    reconstruct_id_from_type_and_inner_part,
)
from ntid.codec.transcoder import decode_id_from_bytes, encode_id_to_bytes

__all__ = [
    "make_id",
    "make_compound_id",
    "make_symmetric_id",
    "get_type_from_id",
    "get_inner_part_of_id",
    "reconstruct_id_from_type_and_inner_part",
    "encode_id_to_bytes",
    "decode_id_from_bytes",
]
