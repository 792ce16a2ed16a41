"""Conformance vectors for secp256k1 point arithmetic and ECDSA, from libsecp256k1."""

__version__ = "0.1.0"
