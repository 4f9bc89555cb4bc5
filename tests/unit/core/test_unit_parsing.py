# tests/unit/core/test_unit_parsing.py — v1
"""Tests for core/parsing.py — integer token readers."""

from __future__ import annotations

import pytest

from modscore.core.errors import InputFileNotFoundError
from modscore.core.parsing import read_int_pairs, read_ints, read_text, split_tokens


class TestReadInts:
    def test_reads_all(self):
        assert list(read_ints(["1", "-1", "30"])) == [1, -1, 30]

    def test_stops_at_malformed(self):
        assert list(read_ints(["1", "x", "3"])) == [1]

    def test_empty(self):
        assert list(read_ints([])) == []

    def test_underscore_digits_are_malformed(self):
        assert list(read_ints(["1", "1_0", "20"])) == [1]

    def test_non_ascii_digits_are_malformed(self):
        assert list(read_ints(["7", "\u0661\u0662", "3"])) == [7]

    def test_signed(self):
        assert list(read_ints(["+4", "-2"])) == [4, -2]


class TestSplitTokens:
    def test_ascii_whitespace(self):
        assert split_tokens(" 1\t2\r\n3\x0b4\x0c5 ") == ["1", "2", "3", "4", "5"]

    def test_unicode_whitespace_is_not_a_separator(self):
        assert split_tokens("1\u20282") == ["1\u20282"]

    def test_empty(self):
        assert split_tokens("") == []


class TestReadIntPairs:
    def test_pairs(self):
        assert list(read_int_pairs("1 2 3 4".split())) == [(1, 2), (3, 4)]

    def test_odd_count_drops_last(self):
        assert list(read_int_pairs("1 2 3".split())) == [(1, 2)]

    def test_malformed_second_of_pair(self):
        assert list(read_int_pairs("1 2 3 abc 5 6".split())) == [(1, 2)]


class TestReadText:
    def test_reads(self, write_file):
        assert read_text(write_file("a.txt", "1 2")) == "1 2"

    def test_undecodable_bytes_replaced(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"1 2\n# caf\xe9\n")
        text = read_text(path)
        assert text.startswith("1 2\n")
        assert "\ufffd" in text
        assert list(read_int_pairs(split_tokens(text))) == [(1, 2)]

    def test_missing(self, tmp_path):
        with pytest.raises(InputFileNotFoundError) as exc_info:
            read_text(tmp_path / "missing.txt")
        assert exc_info.value.path == tmp_path / "missing.txt"

    def test_directory(self, tmp_path):
        with pytest.raises(InputFileNotFoundError):
            read_text(tmp_path)
