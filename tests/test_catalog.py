"""
Tests for the bad-input catalog.
"""

import pytest

from secp256k1_vectors import catalog, primitives
from secp256k1_vectors.curve import COMPRESSED, ENCODINGS, FIELD_PRIME, ORDER, UNCOMPRESSED
from secp256k1_vectors.errors import ErrorKind


def as_int(value):
    return int.from_bytes(value, "big")


class TestStability:
    def test_repeated_calls_agree(self):
        assert catalog.bad_privates() == catalog.bad_privates()
        assert catalog.bad_tweaks() == catalog.bad_tweaks()
        assert catalog.bad_signatures() == catalog.bad_signatures()
        for encoding in ENCODINGS:
            assert catalog.bad_points(encoding) == catalog.bad_points(encoding)

    def test_every_entry_has_a_description(self):
        entries = catalog.bad_privates() + catalog.bad_tweaks() + catalog.bad_signatures()
        entries += catalog.bad_points(COMPRESSED) + catalog.bad_points(UNCOMPRESSED)
        assert all(entry.description for entry in entries)


class TestScalars:
    def test_bad_privates(self):
        values = [as_int(e.value) for e in catalog.bad_privates()]
        assert values == [0, ORDER, ORDER + 1, 2 ** 256 - 1]
        assert {e.kind for e in catalog.bad_privates()} == {ErrorKind.BAD_PRIVATE}

    def test_bad_tweaks_allow_zero(self):
        values = [as_int(e.value) for e in catalog.bad_tweaks()]
        assert 0 not in values
        assert all(v >= ORDER for v in values)
        assert {e.kind for e in catalog.bad_tweaks()} == {ErrorKind.BAD_TWEAK}

    def test_bad_privates_are_rejected(self):
        for entry in catalog.bad_privates():
            assert not primitives.is_private(entry.value), entry.description

    def test_bad_signatures_have_one_bad_half(self):
        for entry in catalog.bad_signatures():
            assert len(entry.value) == 64
            r, s = as_int(entry.value[:32]), as_int(entry.value[32:])
            assert (0 < r < ORDER) != (0 < s < ORDER), entry.description
            assert entry.kind is ErrorKind.BAD_SIGNATURE


class TestPoints:
    def test_off_curve_x_is_a_non_residue(self):
        x = catalog.off_curve_x()
        rhs = (pow(x, 3, FIELD_PRIME) + 7) % FIELD_PRIME
        assert pow(rhs, (FIELD_PRIME - 1) // 2, FIELD_PRIME) == FIELD_PRIME - 1

    @pytest.mark.parametrize("encoding", ENCODINGS, ids=lambda e: e.name)
    def test_bad_points_are_rejected(self, encoding):
        for entry in catalog.bad_points(encoding):
            assert not primitives.is_point(entry.value), entry.description
            assert entry.kind is ErrorKind.BAD_POINT

    @pytest.mark.parametrize("encoding", ENCODINGS, ids=lambda e: e.name)
    def test_wrong_lengths_are_included(self, encoding):
        lengths = {len(e.value) for e in catalog.bad_points(encoding)}
        assert encoding.size - 1 in lengths
        assert encoding.size + 1 in lengths

    def test_uncompressed_has_hybrid_prefixes(self):
        prefixes = {e.value[0] for e in catalog.bad_points(UNCOMPRESSED) if len(e.value) == 65}
        assert {0x06, 0x07} <= prefixes

    def test_uncompressed_has_y_coordinate_cases(self):
        descriptions = [e.description for e in catalog.bad_points(UNCOMPRESSED)]
        assert any("Bad Y coordinate" in d for d in descriptions)
        assert not any("Bad Y coordinate" in e.description for e in catalog.bad_points(COMPRESSED))
