"""
Tests for the output document builder and writer.
"""

import io
import json

import pytest

from secp256k1_vectors import writer
from secp256k1_vectors.errors import ErrorKind
from secp256k1_vectors.fixtures import (
    IsPointFixture,
    PointAddFixture,
    PointAddScalarFixture,
    PointCompressFixture,
    SignFixture,
)


@pytest.fixture(scope="module")
def document(point_sets, compression_vectors, signature_vectors):
    return writer.build_document(point_sets, compression_vectors, signature_vectors)


class TestRecords:
    def test_description_omitted_when_empty(self):
        record = writer.is_point_json(IsPointFixture(b"\x02", True))
        assert list(record) == ["P", "expected"]

    def test_description_first(self):
        record = writer.is_point_json(IsPointFixture(b"\x02", False, "Bad"))
        assert list(record) == ["description", "P", "expected"]
        assert record["P"] == "02"

    def test_infinity_is_null(self):
        record = writer.point_add_json(PointAddFixture(b"\x02", b"\x03", None, description="Adds to infinity"))
        assert record == {"description": "Adds to infinity", "P": "02", "Q": "03", "expected": None}

    def test_invalid_has_exception_not_expected(self):
        record = writer.point_add_scalar_json(PointAddScalarFixture(b"\x02", b"\x01", exception=ErrorKind.BAD_TWEAK))
        assert record == {"P": "02", "d": "01", "exception": "BAD_TWEAK"}

    def test_compress_has_no_description(self):
        record = writer.point_compress_json(PointCompressFixture(bytes(33), True, None))
        assert record == {"P": "00" * 33, "compress": True, "expected": None}

    def test_sign_field_order(self):
        record = writer.sign_json(SignFixture(b"\x01", b"\x02", b"\x03", False))
        assert list(record) == ["d", "m", "signature", "verifies"]
        assert record["verifies"] is False


class TestDocument:
    def test_layout(self, document):
        assert list(document) == ["valid", "invalid"]
        assert list(document["valid"]) == [
            "isPoint", "pointAdd", "pointAddScalar", "pointFromScalar", "pointCompress", "sign",
        ]
        assert list(document["invalid"]) == [
            "sign", "verify", "pointAdd", "pointAddScalar", "pointFromScalar",
        ]

    def test_compressed_sets_come_first(self, document, compressed_vectors, uncompressed_vectors):
        records = document["valid"]["pointAdd"]
        assert len(records) == len(compressed_vectors.point_add) + len(uncompressed_vectors.point_add)
        assert len(records[0]["P"]) == 66
        assert len(records[-1]["P"]) == 130

    def test_exceptions_are_known_kinds(self, document):
        kinds = {kind.value for kind in ErrorKind}
        for records in document["invalid"].values():
            assert records
            for record in records:
                assert record["exception"] in kinds
                assert "expected" not in record

    def test_fixed_width_hex(self, document):
        for record in document["valid"]["sign"]:
            assert len(record["d"]) == 64
            assert len(record["m"]) == 64
            assert len(record["signature"]) == 128
        for record in document["valid"]["pointFromScalar"]:
            assert len(record["d"]) == 64

    def test_write_document(self, document):
        stream = io.StringIO()
        writer.write_document(document, stream)
        text = stream.getvalue()
        assert text.endswith("}\n")
        assert json.loads(text) == document
