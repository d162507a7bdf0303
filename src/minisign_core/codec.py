"""Fixed-layout binary records and their base64 bodies."""
from __future__ import annotations

import base64
import struct
from typing import Tuple

from .algorithms import ensure_private_key_algorithm
from .exceptions import FormatError
from .models import ALGORITHM_SIZE, KEY_ID_SIZE, SIGNATURE_SIZE, PrivateKey, PublicKey

# algorithm, key id, public key
PUBLIC_KEY_STRUCT = struct.Struct("2s8s32s")
# algorithm, kdf algorithm, kdf rounds, salt, checksum, key id, secret key
PRIVATE_KEY_STRUCT = struct.Struct("2s2s4s16s8s8s64s")
# algorithm, key id, signature
SIGNATURE_STRUCT = struct.Struct("2s8s64s")

_LINE_BREAKS = str.maketrans("", "", "\r\n")


def b64e(data: bytes) -> str:
    """Standard base64 with padding"""
    return base64.b64encode(data).decode("ascii")


def b64d(value: str, *, size: int, what: str) -> bytes:
    """Strict standard base64 decode of a record of exactly ``size`` bytes.

    Line terminators are ignored so that a body read from a file line still
    decodes; every other character outside the alphabet is an error.
    """
    try:
        data = base64.b64decode(value.translate(_LINE_BREAKS), validate=True)
    except ValueError as exc:
        raise FormatError(f"Invalid encoded {what}") from exc
    if len(data) != size:
        raise FormatError(f"Invalid encoded {what}: expected {size} bytes, got {len(data)}")
    return data


def decode_public_key(body: str) -> PublicKey:
    data = b64d(body, size=PUBLIC_KEY_STRUCT.size, what="public key")
    algorithm, key_id, key = PUBLIC_KEY_STRUCT.unpack(data)
    return PublicKey(algorithm=algorithm, key_id=key_id, key=key)


def decode_private_key(body: str) -> PrivateKey:
    data = b64d(body, size=PRIVATE_KEY_STRUCT.size, what="secret key")
    fields = PRIVATE_KEY_STRUCT.unpack(data)
    ensure_private_key_algorithm(fields[0])
    return PrivateKey(*fields)


def decode_signature(first: str, second: str) -> Tuple[bytes, bytes, bytes, bytes]:
    """Decode both signature segments into algorithm, key id, signature and global signature."""
    data = b64d(first, size=SIGNATURE_STRUCT.size, what="signature")
    global_signature = b64d(second, size=SIGNATURE_SIZE, what="global signature")
    algorithm, key_id, signature = SIGNATURE_STRUCT.unpack(data)
    return algorithm, key_id, signature, global_signature


def encode_public_key(key: PublicKey) -> str:
    return b64e(PUBLIC_KEY_STRUCT.pack(key.algorithm, key.key_id, key.key))


def encode_private_key(key: PrivateKey) -> str:
    return b64e(
        PRIVATE_KEY_STRUCT.pack(
            key.algorithm,
            key.kdf_algorithm,
            key.kdf_rounds,
            key.salt,
            key.checksum,
            key.key_id,
            key.key,
        )
    )


def encode_signature(algorithm: bytes, key_id: bytes, signature: bytes) -> str:
    for name, value, size in (("algorithm", algorithm, ALGORITHM_SIZE), ("key id", key_id, KEY_ID_SIZE), ("signature", signature, SIGNATURE_SIZE)):
        if len(value) != size:
            raise FormatError(f"Signature {name} must be {size} bytes, got {len(value)}")
    return b64e(SIGNATURE_STRUCT.pack(algorithm, key_id, signature))


def encode_global_signature(global_signature: bytes) -> str:
    if len(global_signature) != SIGNATURE_SIZE:
        raise FormatError(f"Global signature must be {SIGNATURE_SIZE} bytes, got {len(global_signature)}")
    return b64e(global_signature)


__all__ = [
    "PRIVATE_KEY_STRUCT",
    "PUBLIC_KEY_STRUCT",
    "SIGNATURE_STRUCT",
    "b64d",
    "b64e",
    "decode_private_key",
    "decode_public_key",
    "decode_signature",
    "encode_global_signature",
    "encode_private_key",
    "encode_public_key",
    "encode_signature",
]
