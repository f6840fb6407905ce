"""Tests for random NTID generation."""

import re

from ntid import make_id
from ntid.codec.alphabet import ALPHABET, RANDOM_BODY_LENGTH


class TestMakeId:
    def test_has_type_prefix(self):
        ntid = make_id("test")
        assert ntid.startswith("test[")
        assert ntid.endswith("]")

    def test_length(self):
        type_ = "test"
        ntid = make_id(type_)
        assert len(ntid) == len(type_) + 2 + RANDOM_BODY_LENGTH

    def test_body_uses_alphabet(self):
        body = make_id("User")[len("User["):-1]
        assert len(body) == 22
        assert set(body) <= set(ALPHABET)

    def test_matches_url_safe_pattern(self):
        assert re.fullmatch(r"Photo\[[A-Za-z0-9_-]{22}\]", make_id("Photo"))

    def test_unique_same_type(self):
        ids = {make_id("test") for _ in range(10000)}
        assert len(ids) == 10000

    def test_unique_distinct_types(self):
        ids = {make_id(f"test{i}") for i in range(10000)}
        assert len(ids) == 10000

    def test_type_not_validated(self):
        # The codec leaves lexical checks to callers
        ntid = make_id("weird type!")
        assert ntid.startswith("weird type![")
