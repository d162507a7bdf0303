# BLAKE2b-512 digest used by prehashed signatures.
from __future__ import annotations
import hashlib

DIGEST_SIZE = 64


def blake2b_512(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=DIGEST_SIZE).digest()
