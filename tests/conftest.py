"""
Shared fixtures: a seeded random source and small generation runs.
"""

import pytest

from secp256k1_vectors.compression import generate_compression_vectors
from secp256k1_vectors.config import GeneratorConfig
from secp256k1_vectors.curve import COMPRESSED, UNCOMPRESSED
from secp256k1_vectors.points import generate_point_vectors
from secp256k1_vectors.randomness import RandomSource
from secp256k1_vectors.signatures import generate_signature_vectors


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(seed=1234)


@pytest.fixture(scope="session")
def config() -> GeneratorConfig:
    """Reduced counts so the suite stays fast; structure is unchanged."""
    return GeneratorConfig(fuzz_iterations=400, random_points=8, combine_rounds=10, seed=7)


@pytest.fixture(scope="session")
def compressed_vectors(config):
    return generate_point_vectors(COMPRESSED, RandomSource(config.seed), config)


@pytest.fixture(scope="session")
def uncompressed_vectors(config):
    return generate_point_vectors(UNCOMPRESSED, RandomSource(config.seed), config)


@pytest.fixture(scope="session")
def point_sets(compressed_vectors, uncompressed_vectors):
    return [compressed_vectors, uncompressed_vectors]


@pytest.fixture(scope="session")
def compression_vectors():
    return generate_compression_vectors()


@pytest.fixture(scope="session")
def signature_vectors(config):
    return generate_signature_vectors(RandomSource(config.seed), config)
