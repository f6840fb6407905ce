"""Tests for the pydantic NTID types."""

import pytest
from pydantic import BaseModel, Field, ValidationError

from ntid import InvalidFormatError, make_compound_id, make_id
from ntid.models import NtidStr, ParsedNtid, RandomNtidStr

FAKE_ID = "FakeType[MZlL-RDgaMn05ebg3iyTt8]"


class Like(BaseModel):
    """Caller model using NTID fields."""

    id: NtidStr
    user_id: RandomNtidStr = Field(default_factory=lambda: make_id("User"))


class TestNtidStr:
    def test_accepts_compound(self):
        like_id = make_compound_id("Like", [make_id("User"), make_id("Photo")])
        assert Like(id=like_id).id == like_id

    def test_rejects_malformed(self):
        with pytest.raises(ValidationError, match="not a valid NTID"):
            Like(id="invalid_id")


class TestRandomNtidStr:
    def test_default_factory(self):
        like = Like(id=FAKE_ID)
        assert like.user_id.startswith("User[")

    def test_rejects_compound(self):
        compound = make_compound_id("User", [make_id("A")])
        with pytest.raises(ValidationError, match="random body"):
            Like(id=FAKE_ID, user_id=compound)

    def test_rejects_non_alphabet(self):
        with pytest.raises(ValidationError):
            Like(id=FAKE_ID, user_id="User[" + "A" * 21 + "!]")


class TestParsedNtid:
    def test_from_id(self):
        parsed = ParsedNtid.from_id(FAKE_ID)
        assert parsed.type == "FakeType"
        assert parsed.inner_part == "MZlL-RDgaMn05ebg3iyTt8"
        assert parsed.id == FAKE_ID
        assert str(parsed) == FAKE_ID

    def test_from_id_invalid(self):
        with pytest.raises(InvalidFormatError):
            ParsedNtid.from_id("invalid_id")

    def test_is_random(self):
        assert ParsedNtid.from_id(make_id("User")).is_random
        compound = make_compound_id("Edge", [make_id("A"), make_id("B")])
        assert not ParsedNtid.from_id(compound).is_random

    def test_bytes_round_trip(self):
        parsed = ParsedNtid.from_id(make_id("Photo"))
        data = parsed.to_bytes()
        assert len(data) == 17
        assert ParsedNtid.from_bytes("Photo", data) == parsed

    def test_rejects_bad_type(self):
        with pytest.raises(ValidationError):
            ParsedNtid(type="", inner_part="x")
        with pytest.raises(ValidationError):
            ParsedNtid(type="Bad[", inner_part="x")

    def test_frozen(self):
        parsed = ParsedNtid.from_id(FAKE_ID)
        with pytest.raises(ValidationError):
            parsed.type = "Other"
