"""Immutable records for Minisign keys and signatures."""
from __future__ import annotations

from dataclasses import dataclass, field

from .algorithms import ED25519, SignatureMode, signature_mode
from .exceptions import FormatError, MalformedComment

TRUSTED_COMMENT_PREFIX = "trusted comment: "
UNTRUSTED_COMMENT_PREFIX = "untrusted comment: "

ALGORITHM_SIZE = 2
KEY_ID_SIZE = 8
PUBLIC_KEY_SIZE = 32
SECRET_KEY_SIZE = 64
SIGNATURE_SIZE = 64


def _check_width(record: object, name: str, size: int) -> None:
    value = getattr(record, name)
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise FormatError(f"{type(record).__name__}.{name} must be bytes")
    value = bytes(value)
    if len(value) != size:
        raise FormatError(f"{type(record).__name__}.{name} must be {size} bytes, got {len(value)}")
    object.__setattr__(record, name, value)


def format_key_id(key_id: bytes) -> str:
    """Render a key id the way minisign prints it (little-endian hex)."""
    return key_id[::-1].hex().upper()


@dataclass(frozen=True, slots=True)
class PublicKey:
    algorithm: bytes
    key_id: bytes
    key: bytes

    def __post_init__(self) -> None:
        _check_width(self, "algorithm", ALGORITHM_SIZE)
        _check_width(self, "key_id", KEY_ID_SIZE)
        _check_width(self, "key", PUBLIC_KEY_SIZE)


@dataclass(frozen=True, slots=True)
class PrivateKey:
    """Decoded secret key record.

    The KDF fields are kept as stored; ``key`` is expected to be the already
    decrypted ``seed || public key`` material.
    """

    algorithm: bytes
    kdf_algorithm: bytes
    kdf_rounds: bytes
    salt: bytes
    checksum: bytes
    key_id: bytes
    key: bytes = field(repr=False)

    def __post_init__(self) -> None:
        _check_width(self, "algorithm", ALGORITHM_SIZE)
        _check_width(self, "kdf_algorithm", 2)
        _check_width(self, "kdf_rounds", 4)
        _check_width(self, "salt", 16)
        _check_width(self, "checksum", 8)
        _check_width(self, "key_id", KEY_ID_SIZE)
        _check_width(self, "key", SECRET_KEY_SIZE)

    def public_key(self) -> PublicKey:
        return PublicKey(algorithm=ED25519, key_id=self.key_id, key=self.key[SECRET_KEY_SIZE - PUBLIC_KEY_SIZE:])


@dataclass(frozen=True, slots=True)
class Signature:
    """Decoded signature file.

    Both comment fields hold their armor lines verbatim, prefixes included.
    """

    untrusted_comment: str
    algorithm: bytes
    key_id: bytes
    signature: bytes
    trusted_comment: str
    global_signature: bytes

    def __post_init__(self) -> None:
        _check_width(self, "algorithm", ALGORITHM_SIZE)
        _check_width(self, "key_id", KEY_ID_SIZE)
        _check_width(self, "signature", SIGNATURE_SIZE)
        _check_width(self, "global_signature", SIGNATURE_SIZE)

    @property
    def mode(self) -> SignatureMode:
        return signature_mode(self.algorithm)

    @property
    def trusted_comment_text(self) -> str:
        if not self.trusted_comment.startswith(TRUSTED_COMMENT_PREFIX):
            raise MalformedComment("Unexpected format for the trusted comment")
        return self.trusted_comment[len(TRUSTED_COMMENT_PREFIX):]


__all__ = [
    "TRUSTED_COMMENT_PREFIX",
    "UNTRUSTED_COMMENT_PREFIX",
    "PrivateKey",
    "PublicKey",
    "Signature",
    "format_key_id",
]
