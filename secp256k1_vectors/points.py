"""Point membership, addition, tweak and derivation vectors for one encoding.

Boundary expectations are derived from point_from_scalar of the modular
scalar sum and must match what point_add / point_add_scalar return; the
chained homomorphism check at the end ties all three operations together.
A disagreement anywhere raises ConsistencyError.
"""
import logging

from . import catalog
from .curve import ORDER, ONE, generator, scalar
from .errors import ConsistencyError, ErrorKind, agree
from .fixtures import (
    IsPointFixture,
    PointAddFixture,
    PointAddScalarFixture,
    PointFromScalarFixture,
    PointVectors,
)
from .primitives import is_point, point_add, point_add_scalar, point_from_int, point_from_scalar, scalar_add

logger = logging.getLogger(__name__)

INFINITY = "Adds to infinity"

# (a, b, description) for aG + bG, negative values taken mod n
POINT_ADD_CASES = (
    (-1, -1, ""),
    (-1, -2, ""),
    (1, -1, INFINITY),
    (1, -2, "== G - 1"),
    (2, -1, "== 1"),
    (1, 1, ""),
    (1, 2, ""),
)

# (k, t, description) for kG + t
POINT_ADD_SCALAR_CASES = (
    (-1, 0, ""),
    (-1, 1, INFINITY),
    (-1, 2, ""),
    (-1, 3, ""),
    (-1, -1, ""),
    (-1, -2, ""),
    (-2, 1, ""),
    (-2, 2, INFINITY),
    (-2, 3, ""),
    (1, -1, INFINITY),
    (1, -2, "== G - 1"),
    (2, -1, "== 1"),
    (1, 1, ""),
    (2, 1, ""),
    (3, 1, ""),
    (4, 1, ""),
)

POINT_FROM_SCALAR_CASES = (1, 2, 3, -1, -2, -3)


def point_of(encoding, k):
    """kG with k reduced mod n; None is the point at infinity."""
    k %= ORDER
    if k == 0:
        return None
    return point_from_int(encoding, k).unwrap(f"pointFromScalar({k})")


def _is_point_vectors(encoding, g, rng, count):
    fixtures = [IsPointFixture(g, True)]
    for prefix in (0x02, 0x03, 0x04):
        fixtures.append(IsPointFixture(bytes([prefix]) + bytes(encoding.size - 1), False))
    for k in (1, 2, 3):
        fixtures.append(IsPointFixture(point_of(encoding, k), True))

    for entry in catalog.bad_points(encoding):
        fixtures.append(IsPointFixture(entry.value, False, entry.description))

    for _ in range(count):
        p = point_from_scalar(encoding, rng.private()).unwrap("pointFromScalar(random)")
        fixtures.append(IsPointFixture(p, True))

    for f in fixtures:
        agree(f"isPoint({f.P.hex()})", is_point(f.P), f.expected)
    return tuple(fixtures)


def _point_add_vectors(encoding, g, rng, count):
    valid = []
    for a, b, description in POINT_ADD_CASES:
        p, q, e = point_of(encoding, a), point_of(encoding, b), point_of(encoding, a + b)
        actual = point_add(p, q).unwrap(f"pointAdd({a}G, {b}G)")
        valid.append(PointAddFixture(p, q, agree(f"pointAdd({a}G, {b}G)", actual, e), description=description))

    for _ in range(count):
        p = point_from_scalar(encoding, rng.private()).unwrap("pointFromScalar(random)")
        q = point_from_scalar(encoding, rng.private()).unwrap("pointFromScalar(random)")
        valid.append(PointAddFixture(p, q, point_add(p, q).unwrap("pointAdd(random)")))

    invalid = []
    for entry in catalog.bad_points(encoding):
        for p, q in ((entry.value, g), (g, entry.value)):
            point_add(p, q).unwrap_error(ErrorKind.BAD_POINT, f"pointAdd({entry.description})")
            invalid.append(PointAddFixture(p, q, exception=ErrorKind.BAD_POINT, description=entry.description))
    return valid, invalid


def _point_add_scalar_vectors(encoding, g):
    valid = []
    for k, t, description in POINT_ADD_SCALAR_CASES:
        p, d, e = point_of(encoding, k), scalar(t % ORDER), point_of(encoding, k + t)
        actual = point_add_scalar(p, d).unwrap(f"pointAddScalar({k}G, {t})")
        valid.append(PointAddScalarFixture(p, d, agree(f"pointAddScalar({k}G, {t})", actual, e), description=description))

    invalid = []
    for entry in catalog.bad_points(encoding):
        point_add_scalar(entry.value, ONE).unwrap_error(ErrorKind.BAD_POINT, f"pointAddScalar({entry.description})")
        invalid.append(PointAddScalarFixture(entry.value, ONE, exception=ErrorKind.BAD_POINT, description=entry.description))
    for entry in catalog.bad_tweaks():
        point_add_scalar(g, entry.value).unwrap_error(ErrorKind.BAD_TWEAK, f"pointAddScalar({entry.description})")
        invalid.append(PointAddScalarFixture(g, entry.value, exception=ErrorKind.BAD_TWEAK, description=entry.description))
    return valid, invalid


def _point_from_scalar_vectors(encoding):
    valid = [PointFromScalarFixture(scalar(k % ORDER), point_of(encoding, k)) for k in POINT_FROM_SCALAR_CASES]

    invalid = []
    for entry in catalog.bad_privates():
        point_from_scalar(encoding, entry.value).unwrap_error(ErrorKind.BAD_PRIVATE, f"pointFromScalar({entry.description})")
        invalid.append(PointFromScalarFixture(entry.value, exception=ErrorKind.BAD_PRIVATE, description=entry.description))
    return valid, invalid


def combine(encoding, rng, rounds):
    """Check (d1 + ... + dk)G == d1G + ... + dkG over a chain of random d.

    Each round computes the next partial sum three ways: pointAdd of the
    running point, pointAddScalar of the running point and pointFromScalar
    of the running scalar. All three must agree.
    """
    adds, tweaks, derivations = [], [], []
    total = ONE
    total_q = point_from_scalar(encoding, total).unwrap("pointFromScalar(1)")

    for i in range(1, rounds + 1):
        d = rng.private()
        q = point_from_scalar(encoding, d).unwrap(f"round {i}: pointFromScalar(d)")
        p = point_add(total_q, q).unwrap(f"round {i}: pointAdd")
        u = point_add_scalar(total_q, d).unwrap(f"round {i}: pointAddScalar")
        agree(f"round {i}: pointAdd vs pointAddScalar", u, p)

        total = scalar_add(total, d).unwrap(f"round {i}: scalarAdd")
        r = point_from_scalar(encoding, total).unwrap(f"round {i}: pointFromScalar(sum)")
        agree(f"round {i}: pointAdd vs pointFromScalar", r, p)

        adds.append(PointAddFixture(total_q, q, p))
        tweaks.append(PointAddScalarFixture(total_q, d, p))
        derivations.append(PointFromScalarFixture(total, p))
        total_q = p

    return tuple(adds), tuple(tweaks), tuple(derivations)


def generate_point_vectors(encoding, rng, config):
    g = generator(encoding)
    if point_of(encoding, 1) != g:
        raise ConsistencyError(f"pointFromScalar(1) is not the {encoding.name} generator")

    is_point_set = _is_point_vectors(encoding, g, rng, config.random_points)
    pa, paf = _point_add_vectors(encoding, g, rng, config.random_points)
    pas, pasf = _point_add_scalar_vectors(encoding, g)
    pfs, pfsf = _point_from_scalar_vectors(encoding)

    adds, tweaks, derivations = combine(encoding, rng, config.combine_rounds)

    vectors = PointVectors(
        encoding=encoding,
        is_point=is_point_set,
        point_add=tuple(pa) + adds,
        point_add_invalid=tuple(paf),
        point_add_scalar=tuple(pas) + tweaks,
        point_add_scalar_invalid=tuple(pasf),
        point_from_scalar=tuple(pfs) + derivations,
        point_from_scalar_invalid=tuple(pfsf),
    )
    logger.info(
        "Generated %s point vectors: %d isPoint, %d pointAdd, %d pointAddScalar, %d pointFromScalar",
        encoding.name,
        len(vectors.is_point),
        len(vectors.point_add) + len(vectors.point_add_invalid),
        len(vectors.point_add_scalar) + len(vectors.point_add_scalar_invalid),
        len(vectors.point_from_scalar) + len(vectors.point_from_scalar_invalid),
    )
    return vectors
