"""secp256k1 domain parameters and point encoding descriptors."""

from dataclasses import dataclass

ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
FIELD_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
UINT256_MAX = (1 << 256) - 1

SCALAR_BYTES = 32
SIGNATURE_BYTES = 64


@dataclass(frozen=True)
class Encoding:
    name: str
    size: int
    compressed: bool


COMPRESSED = Encoding("compressed", 33, True)
UNCOMPRESSED = Encoding("uncompressed", 65, False)
ENCODINGS = (COMPRESSED, UNCOMPRESSED)


def scalar(value):
    return value.to_bytes(SCALAR_BYTES, "big")


def encode_point(encoding, x, y):
    if encoding.compressed:
        return bytes([0x03 if y & 1 else 0x02]) + scalar(x)
    return b"\x04" + scalar(x) + scalar(y)


def generator(encoding):
    return encode_point(encoding, GX, GY)


ZERO = scalar(0)
ONE = scalar(1)
TWO = scalar(2)
THREE = scalar(3)
ORDER_LESS_1 = scalar(ORDER - 1)
ORDER_LESS_2 = scalar(ORDER - 2)
ORDER_LESS_3 = scalar(ORDER - 3)
MAX_SCALAR = scalar(UINT256_MAX)
