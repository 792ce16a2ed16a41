"""Generate secp256k1 point and ECDSA conformance vectors as one JSON document.

Every expected value comes from libsecp256k1 (through coincurve), after
being cross-checked against independently derived values. The document
goes to stdout in a single write; progress logging goes to stderr.

Usage:
    python -m secp256k1_vectors > secp256k1_vectors.json

Set SECP256K1_VECTORS_SEED for a reproducible corpus.
"""
import logging
import sys

from .compression import generate_compression_vectors
from .config import GeneratorConfig
from .curve import ENCODINGS
from .errors import GenerationError
from .points import generate_point_vectors
from .randomness import RandomSource
from .signatures import generate_signature_vectors
from .writer import build_document, write_document

logger = logging.getLogger(__name__)


def generate(config, rng=None):
    rng = rng or RandomSource(config.seed)
    point_sets = [generate_point_vectors(encoding, rng, config) for encoding in ENCODINGS]
    compression = generate_compression_vectors()
    signatures = generate_signature_vectors(rng, config)
    return build_document(point_sets, compression, signatures)


def main(stream=None):
    config = GeneratorConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        document = generate(config)
    except GenerationError:
        logger.critical("Primitive library is inconsistent, no vectors written", exc_info=True)
        return 1

    write_document(document, stream or sys.stdout)
    logger.info("Wrote %d valid and %d invalid vectors",
                sum(len(v) for v in document["valid"].values()),
                sum(len(v) for v in document["invalid"].values()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
