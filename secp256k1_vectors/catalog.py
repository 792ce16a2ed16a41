"""Canonical bad inputs shared by every invalid fixture set.

Each catalog is built once and cached, so the point, sign and verify
generators all agree on exactly which inputs are invalid and why.
"""
from dataclasses import dataclass
from functools import lru_cache

from .curve import FIELD_PRIME, GX, GY, ONE, ORDER, UINT256_MAX, encode_point, scalar
from .errors import ErrorKind


@dataclass(frozen=True)
class CatalogEntry:
    value: bytes
    description: str
    kind: ErrorKind


def _on_curve_x(x):
    # Euler's criterion for x^3 + 7
    rhs = (pow(x, 3, FIELD_PRIME) + 7) % FIELD_PRIME
    return rhs == 0 or pow(rhs, (FIELD_PRIME - 1) // 2, FIELD_PRIME) == 1


@lru_cache(maxsize=None)
def off_curve_x():
    x = 1
    while _on_curve_x(x):
        x += 1
    return x


def _out_of_range(kind, noun):
    return (
        CatalogEntry(scalar(ORDER), f"{noun} == n", kind),
        CatalogEntry(scalar(ORDER + 1), f"{noun} > n", kind),
        CatalogEntry(scalar(UINT256_MAX), f"{noun} == 2^256 - 1", kind),
    )


@lru_cache(maxsize=None)
def bad_privates():
    zero = CatalogEntry(scalar(0), "Private key == 0", ErrorKind.BAD_PRIVATE)
    return (zero,) + _out_of_range(ErrorKind.BAD_PRIVATE, "Private key")


@lru_cache(maxsize=None)
def bad_tweaks():
    return _out_of_range(ErrorKind.BAD_TWEAK, "Tweak")


@lru_cache(maxsize=None)
def bad_signatures():
    kind = ErrorKind.BAD_SIGNATURE
    zero, order, top = scalar(0), scalar(ORDER), scalar(UINT256_MAX)
    return (
        CatalogEntry(zero + ONE, "r == 0", kind),
        CatalogEntry(ONE + zero, "s == 0", kind),
        CatalogEntry(order + ONE, "r == n", kind),
        CatalogEntry(ONE + order, "s == n", kind),
        CatalogEntry(top + ONE, "r > n", kind),
        CatalogEntry(ONE + top, "s > n", kind),
    )


@lru_cache(maxsize=None)
def bad_points(encoding):
    kind = ErrorKind.BAD_POINT
    g = encode_point(encoding, GX, GY)
    body = g[1:]
    other_prefix = b"\x02" if not encoding.compressed else b"\x04"

    def with_x(x):
        return encode_point(encoding, x, GY)[:1] + scalar(x) + body[32:]

    entries = [
        CatalogEntry(g[:-1], "Bad sequence length (too short)", kind),
        CatalogEntry(g + b"\x00", "Bad sequence length (too long)", kind),
        CatalogEntry(b"\x00" + body, "Bad sequence prefix (0x00)", kind),
        CatalogEntry(b"\x01" + body, "Bad sequence prefix (0x01)", kind),
        CatalogEntry(b"\x05" + body, "Bad sequence prefix (0x05)", kind),
        CatalogEntry(other_prefix + body, f"Bad sequence prefix for {encoding.name} length", kind),
        CatalogEntry(b"\xff" * encoding.size, "Point at infinity sentinel", kind),
        CatalogEntry(with_x(off_curve_x()), "Bad X coordinate (not on curve)", kind),
        CatalogEntry(with_x(FIELD_PRIME), "Bad X coordinate (== P)", kind),
        CatalogEntry(with_x(UINT256_MAX), "Bad X coordinate (== 2^256 - 1)", kind),
    ]
    if not encoding.compressed:
        entries += [
            CatalogEntry(b"\x06" + body, "Bad sequence prefix (hybrid 0x06)", kind),
            CatalogEntry(b"\x07" + body, "Bad sequence prefix (hybrid 0x07)", kind),
            CatalogEntry(b"\x04" + scalar(GX) + scalar(GY + 1), "Bad Y coordinate (not on curve)", kind),
            CatalogEntry(b"\x04" + scalar(GX) + scalar(FIELD_PRIME), "Bad Y coordinate (== P)", kind),
        ]
    return tuple(entries)
