"""Adapters over the Ed25519 and BLAKE2b primitives."""
from .ed25519 import Ed25519Signer
from .hasher import blake2b_512

__all__ = ["Ed25519Signer", "blake2b_512"]
