from __future__ import annotations

import secrets

from cryptography.exceptions import InvalidSignature as BadSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey
)

from ..exceptions import FormatError, InvalidKeyMaterial

SEED_SIZE = 32
SECRET_KEY_SIZE = 64


class Ed25519Signer:
    """Thin wrapper around Ed25519 that normalizes error handling"""

    def __init__(self, *, private_key: Ed25519PrivateKey | None = None, public_key: Ed25519PublicKey | None = None) -> None:
        if private_key is None and public_key is None:
            raise ValueError("At least one of private_key or public_key is required")
        self._private_key = private_key
        self._public_key = public_key or private_key.public_key()  #* type: ignore[union-attr]

    @classmethod
    def from_secret_key(cls, data: bytes) -> Ed25519Signer:
        """Load an expanded secret key laid out as ``seed || public key``.

        The trailing half must match the key derived from the seed; anything
        else is typically a key whose payload is still encrypted.
        """
        if len(data) != SECRET_KEY_SIZE:
            raise FormatError(f"Ed25519 secret key must be {SECRET_KEY_SIZE} bytes, got {len(data)}")
        private_key = Ed25519PrivateKey.from_private_bytes(data[:SEED_SIZE])
        derived = private_key.public_key().public_bytes_raw()
        if not secrets.compare_digest(derived, data[SEED_SIZE:]):
            raise InvalidKeyMaterial("Secret key does not match its embedded public key")
        return cls(private_key=private_key)

    @classmethod
    def from_public_bytes(cls, data: bytes) -> Ed25519Signer:
        try:
            return cls(public_key=Ed25519PublicKey.from_public_bytes(data))
        except ValueError as exc:
            raise FormatError("Invalid Ed25519 public key") from exc

    def sign(self, *, message: bytes) -> bytes:
        if self._private_key is None:
            raise InvalidKeyMaterial("Signing requested without private key material")
        return self._private_key.sign(message)

    def verify(self, *, message: bytes, signature: bytes) -> bool:
        try:
            self._public_key.verify(signature, message)
        except BadSignature:
            return False
        return True
