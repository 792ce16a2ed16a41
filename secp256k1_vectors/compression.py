import logging

from .curve import COMPRESSED, ENCODINGS, UNCOMPRESSED, generator
from .errors import agree
from .fixtures import PointCompressFixture
from .primitives import compress, point_from_int

logger = logging.getLogger(__name__)


def generate_compression_vectors():
    """Encode/decode fixtures for both encodings and both compress flags."""
    fixtures = []

    def add(p, to_compressed, expected):
        actual = compress(p, to_compressed)
        agree(f"compress({p.hex()}, {to_compressed})", actual, expected)
        fixtures.append(PointCompressFixture(p, to_compressed, actual))

    gc, gu = generator(COMPRESSED), generator(UNCOMPRESSED)
    add(gu, True, gc)
    add(gu, False, gu)
    add(gc, True, gc)
    add(gc, False, gu)

    for encoding in ENCODINGS:
        zeros = bytes(encoding.size)
        add(zeros, False, None)
        add(zeros, True, None)

    for i in range(1, 10):
        ic = point_from_int(COMPRESSED, i).unwrap(f"pointFromScalar({i})")
        iu = point_from_int(UNCOMPRESSED, i).unwrap(f"pointFromScalar({i})")
        add(ic, True, ic)
        add(ic, False, iu)
        add(iu, True, ic)
        add(iu, False, iu)

    logger.info("Generated %d pointCompress vectors", len(fixtures))
    return tuple(fixtures)
