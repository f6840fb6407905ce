"""Pydantic types for carrying NTIDs inside data models.

``NtidStr`` and ``RandomNtidStr`` validate identifier fields of caller
models; ``ParsedNtid`` is the split (type, inner part) form.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from ntid.codec.alphabet import is_random_body
from ntid.codec.parser import (
    get_inner_part_of_id,
    get_type_from_id,
    reconstruct_id_from_type_and_inner_part,
)
from ntid.codec.transcoder import decode_id_from_bytes, encode_id_to_bytes
from ntid.types import BytesLike, Ntid


def _check_ntid(value: str) -> str:
    get_type_from_id(value)
    return value


def _check_random_ntid(value: str) -> str:
    if not is_random_body(get_inner_part_of_id(value)):
        raise ValueError(f"{value!r} does not have a 22-character random body")
    return value


NtidStr = Annotated[str, AfterValidator(_check_ntid)]
RandomNtidStr = Annotated[str, AfterValidator(_check_random_ntid)]


class ParsedNtid(BaseModel):
    """An NTID split into its type tag and inner part."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Type tag, e.g. 'User'")
    inner_part: str = Field(description="Random body or comma-joined nested NTIDs")

    @field_validator("type")
    @classmethod
    def type_is_well_formed(cls, v: str) -> str:
        if not v:
            raise ValueError("NTID type must not be empty")
        if "[" in v:
            raise ValueError(f"NTID type {v!r} must not contain '['")
        return v

    @classmethod
    def from_id(cls, id: str) -> ParsedNtid:
        return cls(type=get_type_from_id(id), inner_part=get_inner_part_of_id(id))

    @classmethod
    def from_bytes(cls, type: str, data: BytesLike) -> ParsedNtid:
        return cls.from_id(decode_id_from_bytes(type, data))

    @property
    def id(self) -> Ntid:
        return reconstruct_id_from_type_and_inner_part(self.type, self.inner_part)

    @property
    def is_random(self) -> bool:
        """True for generated IDs, False for compound ones."""
        return is_random_body(self.inner_part)

    def to_bytes(self) -> bytes:
        return encode_id_to_bytes(self.id)

    def __str__(self) -> str:
        return self.id
