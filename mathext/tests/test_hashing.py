"""
Unit Tests: String Hashing
"""

import pytest

from mathext.hashing import hash_string


class TestHashString:
    """Tests for the 64-bit string hash."""

    @pytest.mark.parametrize("s,expected", [
        ("john", 6774539739450401392),
        ("12345678", -4898812128727250071),
        ("XXX_YYY_ZZZ", -8286756815414078424),
        ("xxx_yyy_zzz", -8259655320462518136),
    ])
    def test_known_values(self, s, expected):
        assert hash_string(s) == expected

    def test_empty_is_seed(self):
        assert hash_string("") == 1125899906842597

    def test_distinct(self):
        """Short strings do not collide."""
        values = [
            "", "a", "b", "c", "A", "B", "C", "cat", "CAT",
            "aaaaaaaaaaaaaaaa", "???????????????????????",
            "1", " 1", "  1",
        ]
        assert len({hash_string(v) for v in values}) == len(values)

    def test_signed_64_bit_range(self):
        for s in ("x" * 100, "ünïcödé", "12345678"):
            h = hash_string(s)
            assert -(2 ** 63) <= h < 2 ** 63

    def test_deterministic(self):
        assert hash_string("term") == hash_string("term")
