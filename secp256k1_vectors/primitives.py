"""Curve primitives, delegated to libsecp256k1 through coincurve.

coincurve wraps Bitcoin Core's libsecp256k1, which is the ground truth for
every vector emitted here. Nothing in this module does curve arithmetic of
its own; it only checks input ranges and lengths so that each operation
reports a typed ErrorKind instead of an opaque library exception.

Points are SEC1 bytes and the point at infinity is None. Operations with
two operands answer in the encoding of the first one.
"""
import hashlib
from typing import NamedTuple, Optional

from coincurve import PrivateKey, PublicKey
from coincurve.ecdsa import cdata_to_der, deserialize_compact

from .curve import COMPRESSED, ORDER, SCALAR_BYTES, SIGNATURE_BYTES, UNCOMPRESSED, scalar
from .errors import ConsistencyError, ErrorKind


class Result(NamedTuple):
    value: object = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self):
        return self.error is None

    def unwrap(self, context):
        if self.error is not None:
            raise ConsistencyError(f"{context}: primitive reported {self.error.value}")
        return self.value

    def unwrap_error(self, kind, context):
        if self.error is not kind:
            reported = "success" if self.error is None else self.error.value
            raise ConsistencyError(f"{context}: expected {kind.value}, primitive reported {reported}")
        return kind


def sha256(data):
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).digest()


def scalar_from_hex(text):
    value = bytes.fromhex(text)
    if len(value) != SCALAR_BYTES:
        raise ValueError(f"need {SCALAR_BYTES} bytes, got {len(value)}")
    return value


def _in_range(d, low):
    return len(d) == SCALAR_BYTES and low <= int.from_bytes(d, "big") < ORDER


def is_private(d):
    return _in_range(d, 1)


def is_tweak(d):
    return _in_range(d, 0)


def _encoding_of(p):
    return COMPRESSED if len(p) == COMPRESSED.size else UNCOMPRESSED


# libsecp256k1 also parses the 0x06/0x07 hybrid form, which is not a Point here
SEC1_PREFIXES = {COMPRESSED.size: (0x02, 0x03), UNCOMPRESSED.size: (0x04,)}


def _parse(p):
    if not p or p[0] not in SEC1_PREFIXES.get(len(p), ()):
        return None
    try:
        return PublicKey(bytes(p))
    except ValueError:
        return None


def _negates(a, b):
    ua, ub = a.format(compressed=False), b.format(compressed=False)
    return ua[1:33] == ub[1:33] and ua[33:] != ub[33:]


def is_point(p):
    return _parse(p) is not None


def point_from_scalar(encoding, d):
    if not is_private(d):
        return Result(error=ErrorKind.BAD_PRIVATE)
    return Result(PublicKey.from_secret(d).format(compressed=encoding.compressed))


def point_from_int(encoding, i):
    return point_from_scalar(encoding, scalar(i))


def point_add(p, q):
    a, b = _parse(p), _parse(q)
    if a is None or b is None:
        return Result(error=ErrorKind.BAD_POINT)
    if _negates(a, b):
        return Result(None)
    try:
        total = PublicKey.combine_keys([a, b])
    except ValueError as exc:
        raise ConsistencyError(f"combine failed for {p.hex()} + {q.hex()}") from exc
    return Result(total.format(compressed=_encoding_of(p).compressed))


def point_add_scalar(p, d):
    a = _parse(p)
    if a is None:
        return Result(error=ErrorKind.BAD_POINT)
    if not is_tweak(d):
        return Result(error=ErrorKind.BAD_TWEAK)

    compressed = _encoding_of(p).compressed
    if int.from_bytes(d, "big") == 0:
        return Result(a.format(compressed=compressed))
    if _negates(a, PublicKey.from_secret(d)):
        return Result(None)
    try:
        tweaked = a.add(d)
    except ValueError as exc:
        raise ConsistencyError(f"tweak failed for {p.hex()} + {d.hex()}") from exc
    return Result(tweaked.format(compressed=compressed))


def scalar_add(a, b):
    if not is_private(a):
        return Result(error=ErrorKind.BAD_PRIVATE)
    if not is_tweak(b):
        return Result(error=ErrorKind.BAD_TWEAK)
    if (int.from_bytes(a, "big") + int.from_bytes(b, "big")) % ORDER == 0:
        return Result(error=ErrorKind.BAD_PRIVATE)
    return Result(PrivateKey(a).add(b).secret)


def sign(d, m):
    if not is_private(d):
        return Result(error=ErrorKind.BAD_PRIVATE)
    # RFC 6979 nonce, m is already a digest
    return Result(PrivateKey(d).sign_recoverable(m, hasher=None)[:SIGNATURE_BYTES])


def is_signature(sig):
    return len(sig) == SIGNATURE_BYTES and is_private(sig[:32]) and is_private(sig[32:])


def verify(q, m, sig):
    key = _parse(q)
    if key is None:
        return Result(error=ErrorKind.BAD_POINT)
    if not is_signature(sig):
        return Result(error=ErrorKind.BAD_SIGNATURE)
    der = cdata_to_der(deserialize_compact(bytes(sig)))
    return Result(bool(key.verify(der, m, hasher=None)))


def compress(p, to_compressed):
    key = _parse(p)
    if key is None:
        return None
    return key.format(compressed=to_compressed)
