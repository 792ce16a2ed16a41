"""Assembles every generated fixture set into the single output document.

Layout::

    {"valid":   {"isPoint", "pointAdd", "pointAddScalar", "pointFromScalar",
                 "pointCompress", "sign"},
     "invalid": {"sign", "verify", "pointAdd", "pointAddScalar", "pointFromScalar"}}

Bytes are lowercase hex, the point at infinity (or no result) is null, an
empty description is left out and key order is insertion order.
"""
import json


def _hex(value):
    return None if value is None else value.hex()


def _record(description, fields):
    record = {"description": description} if description else {}
    record.update(fields)
    return record


def _outcome(f):
    if f.exception is not None:
        return {"exception": f.exception.value}
    return {"expected": _hex(f.expected)}


def is_point_json(f):
    return _record(f.description, {"P": _hex(f.P), "expected": f.expected})


def point_add_json(f):
    return _record(f.description, {"P": _hex(f.P), "Q": _hex(f.Q), **_outcome(f)})


def point_add_scalar_json(f):
    return _record(f.description, {"P": _hex(f.P), "d": _hex(f.d), **_outcome(f)})


def point_from_scalar_json(f):
    return _record(f.description, {"d": _hex(f.d), **_outcome(f)})


def point_compress_json(f):
    return {"P": _hex(f.P), "compress": f.compress, "expected": _hex(f.expected)}


def sign_json(f):
    return _record(f.description, {
        "d": _hex(f.d),
        "m": _hex(f.m),
        "signature": _hex(f.signature),
        "verifies": f.verifies,
    })


def bad_sign_json(f):
    return _record(f.description, {"exception": f.exception.value, "d": _hex(f.d), "m": _hex(f.m)})


def bad_verify_json(f):
    return _record(f.description, {
        "exception": f.exception.value,
        "Q": _hex(f.Q),
        "m": _hex(f.m),
        "signature": _hex(f.signature),
    })


def build_document(point_sets, compression, signatures):
    """point_sets are PointVectors in output order (compressed first)."""

    def each(field, to_json):
        return [to_json(f) for vectors in point_sets for f in getattr(vectors, field)]

    return {
        "valid": {
            "isPoint": each("is_point", is_point_json),
            "pointAdd": each("point_add", point_add_json),
            "pointAddScalar": each("point_add_scalar", point_add_scalar_json),
            "pointFromScalar": each("point_from_scalar", point_from_scalar_json),
            "pointCompress": [point_compress_json(f) for f in compression],
            "sign": [sign_json(f) for f in signatures.sign],
        },
        "invalid": {
            "sign": [bad_sign_json(f) for f in signatures.sign_invalid],
            "verify": [bad_verify_json(f) for f in signatures.verify_invalid],
            "pointAdd": each("point_add_invalid", point_add_json),
            "pointAddScalar": each("point_add_scalar_invalid", point_add_scalar_json),
            "pointFromScalar": each("point_from_scalar_invalid", point_from_scalar_json),
        },
    }


def write_document(document, stream):
    stream.write(json.dumps(document, indent=2) + "\n")
    stream.flush()
