"""ECDSA sign/verify vectors, signed by libsecp256k1 (RFC 6979 nonces).

The fuzz corpus flips a single bit in about half of its signatures, so a
verifier under test sees as many forged signatures as genuine ones. Every
``verifies`` flag is checked against libsecp256k1 before it is recorded.
"""
import logging

from . import catalog
from .curve import COMPRESSED, MAX_SCALAR, ONE, ORDER_LESS_1, THREE, ZERO
from .errors import ConsistencyError, ErrorKind, agree
from .fixtures import BadSignFixture, BadVerifyFixture, SignatureVectors, SignFixture
from .primitives import point_from_int, point_from_scalar, scalar_from_hex, sha256, sign, verify

logger = logging.getLogger(__name__)

# Key/message pairs shared with the bitcoinjs-lib ECDSA fixtures
FIXED_KEYS = (
    "0000000000000000000000000000000000000000000000000000000000000001",
    "fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364140",
    "fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364140",
    "0000000000000000000000000000000000000000000000000000000000000001",
    "69ec59eaa1f4f2e36b639716b7c30ca86d9a5375c7b38d8918bd9c0ebc80ba64",
    "00000000000000000000000000007246174ab1e92e9149c6e446fe194d072637",
    "000000000000000000000000000000000000000000056916d0f9b31dc9b637f3",
)

MESSAGES = (
    "Everything should be made as simple as possible, but not simpler.",
    "Equations are more important to me, because politics is for the present, but an equation is something for eternity.",
    "Not only is the Universe stranger than we think, it is stranger than we can think.",
    "How wonderful that we have met with a paradox. Now we have some hope of making progress.",
    "Computer science is no more about computers than astronomy is about telescopes.",
    "...if you aren't, at any given time, scandalized by code you wrote five or even three years ago, you're not learning anywhere near enough",
    "The question of whether computers can think is like the question of whether submarines can swim.",
)

STRANGE_HASH = "Strange hash"

# Bits 0 and 7 of the corrupted byte are never flipped
MUTABLE_BITS = range(1, 7)
MUTABLE_BYTES = 32


def _verifies(q, m, sig):
    result = verify(q, m, sig)
    # a flipped bit can in principle push r out of range
    if result.error is ErrorKind.BAD_SIGNATURE:
        return False
    return result.unwrap(f"verify({sig.hex()})")


def _signed(d, m, description="", q=None):
    sig = sign(d, m).unwrap(f"sign({d.hex()}, {m.hex()})")
    if q is None:
        q = point_from_scalar(COMPRESSED, d).unwrap(f"pointFromScalar({d.hex()})")
    agree(f"verify({sig.hex()})", _verifies(q, m, sig), True)
    return SignFixture(d, m, sig, True, description)


def flip_bit(sig, rng):
    mutated = bytearray(sig)
    mutated[rng.below(MUTABLE_BYTES)] ^= 1 << MUTABLE_BITS[rng.below(len(MUTABLE_BITS))]
    return bytes(mutated)


def fuzz(rng, iterations):
    fixtures = []
    for _ in range(iterations):
        d = rng.private()
        m = rng.scalar()
        q = point_from_scalar(COMPRESSED, d).unwrap("pointFromScalar(random)")
        fixture = _signed(d, m, q=q)

        if rng.coin():
            sig = flip_bit(fixture.signature, rng)
            if _verifies(q, m, sig):
                raise ConsistencyError(f"corrupted signature {sig.hex()} still verifies for {q.hex()}")
            fixture = SignFixture(d, m, sig, False)

        fixtures.append(fixture)
    return fixtures


def _valid_signs(rng, iterations):
    fixtures = []
    for key, message in zip(FIXED_KEYS, MESSAGES):
        fixtures.append(_signed(scalar_from_hex(key), sha256(message), message))

    for message in MESSAGES:
        fixtures.append(_signed(rng.private(), sha256(message), message))

    for d in (ONE, ORDER_LESS_1):
        for m in (ZERO, MAX_SCALAR):
            fixtures.append(_signed(d, m, STRANGE_HASH))

    fixtures.extend(fuzz(rng, iterations))
    return tuple(fixtures)


def _invalid_signs():
    fixtures = []
    for entry in catalog.bad_privates():
        sign(entry.value, ONE).unwrap_error(ErrorKind.BAD_PRIVATE, f"sign({entry.description})")
        fixtures.append(BadSignFixture(entry.value, ONE, ErrorKind.BAD_PRIVATE, entry.description))
    return tuple(fixtures)


def _invalid_verifies():
    q = point_from_int(COMPRESSED, 1).unwrap("pointFromScalar(1)")
    sig = ONE + ONE

    fixtures = []
    for entry in catalog.bad_points(COMPRESSED):
        verify(entry.value, THREE, sig).unwrap_error(ErrorKind.BAD_POINT, f"verify({entry.description})")
        fixtures.append(BadVerifyFixture(entry.value, THREE, sig, ErrorKind.BAD_POINT, entry.description))
    for entry in catalog.bad_signatures():
        verify(q, THREE, entry.value).unwrap_error(ErrorKind.BAD_SIGNATURE, f"verify({entry.description})")
        fixtures.append(BadVerifyFixture(q, THREE, entry.value, ErrorKind.BAD_SIGNATURE, entry.description))
    return tuple(fixtures)


def generate_signature_vectors(rng, config):
    vectors = SignatureVectors(
        sign=_valid_signs(rng, config.fuzz_iterations),
        sign_invalid=_invalid_signs(),
        verify_invalid=_invalid_verifies(),
    )
    forged = sum(1 for f in vectors.sign if not f.verifies)
    logger.info(
        "Generated %d sign vectors (%d corrupted), %d invalid sign, %d invalid verify",
        len(vectors.sign),
        forged,
        len(vectors.sign_invalid),
        len(vectors.verify_invalid),
    )
    return vectors
