"""Signature algorithm negotiation.

A public key always carries the ``Ed`` tag. Whether the message is hashed
before signing is a property of each signature: ``Ed`` signs the message
itself while ``ED`` signs its BLAKE2b-512 digest.
"""
from __future__ import annotations

from enum import Enum

from .crypto.hasher import blake2b_512
from .exceptions import IncompatibleAlgorithm, UnsupportedAlgorithm

ED25519 = b"Ed"
ED25519_PREHASHED = b"ED"


class SignatureMode(Enum):
    STANDARD = ED25519
    PREHASHED = ED25519_PREHASHED

    @property
    def tag(self) -> bytes:
        return self.value


def signature_mode(tag: bytes) -> SignatureMode:
    try:
        return SignatureMode(bytes(tag))
    except ValueError:
        raise UnsupportedAlgorithm(f"Unsupported signature algorithm: {bytes(tag)!r}") from None


def ensure_public_key_algorithm(tag: bytes) -> None:
    if bytes(tag) != ED25519:
        raise IncompatibleAlgorithm(f"Incompatible signature algorithm: {bytes(tag)!r}")


def ensure_private_key_algorithm(tag: bytes) -> None:
    if bytes(tag) != ED25519:
        raise UnsupportedAlgorithm(f"Unsupported signature scheme: {bytes(tag)!r}")


def signed_payload(mode: SignatureMode, message: bytes) -> bytes:
    """Return the bytes the inner signature is computed over."""
    if mode is SignatureMode.PREHASHED:
        return blake2b_512(message)
    return message


__all__ = [
    "ED25519",
    "ED25519_PREHASHED",
    "SignatureMode",
    "ensure_private_key_algorithm",
    "ensure_public_key_algorithm",
    "signature_mode",
    "signed_payload",
]
