from __future__ import annotations

from typing import Callable

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from minisign_core.models import PrivateKey, PublicKey

REFERENCE_PUBLIC_KEY = "RWQf6LRCGA9i53mlYecO4IzT51TGPpvWucNSCh1CBM0QTaLn73Y7GFO3"

REFERENCE_SIGNATURE = (
    "untrusted comment: signature from minisign secret key\n"
    "RWQf6LRCGA9i59SLOFxz6NxvASXDJeRtuZykwQepbDEGt87ig1BNpWaVWuNrm73YiIiJbq71Wi+dP9eKL8OC351vwIasSSbXxwA=\n"
    "trusted comment: timestamp:1635442742\tfile:test\n"
    "0YteLgV960ia80vnA/fHbvkyjl/IoP/HNOCaZfrF0CdhAlp7ok+Tpkya+VpWPX5C/Is3q8a/kEDSY7fBmmgJCg==\n"
)

REFERENCE_PREHASHED_SIGNATURE = (
    "untrusted comment: signature from minisign secret key\n"
    "RUQf6LRCGA9i559r3g7V1qNyJDApGip8MfqcadIgT9CuhV3EMhHoN1mGTkUidF/z7SrlQgXdy8ofjb7bNJJylDOocrCo8KLzZwo=\n"
    "trusted comment: timestamp:1635443258\tfile:test\thashed\n"
    "/cj37GK60vryibFn+ftOgbCvW9NKhKYgjVpFFQUcWPAnjO23wrvVDTt7cloNC06maoBli9q6qwZDXXoaxweICQ==\n"
)


def build_private_key(key_id: bytes = bytes.fromhex("0123456789abcdef")) -> PrivateKey:
    secret = Ed25519PrivateKey.generate()
    return PrivateKey(
        algorithm=b"Ed",
        kdf_algorithm=b"\x00\x00",
        kdf_rounds=bytes(4),
        salt=bytes(16),
        checksum=bytes(8),
        key_id=key_id,
        key=secret.private_bytes_raw() + secret.public_key().public_bytes_raw(),
    )


@pytest.fixture
def reference_public_key() -> str:
    return REFERENCE_PUBLIC_KEY


@pytest.fixture
def reference_signature() -> str:
    return REFERENCE_SIGNATURE


@pytest.fixture
def reference_prehashed_signature() -> str:
    return REFERENCE_PREHASHED_SIGNATURE


@pytest.fixture
def make_private_key() -> Callable[..., PrivateKey]:
    return build_private_key


@pytest.fixture
def private_key() -> PrivateKey:
    return build_private_key()


@pytest.fixture
def public_key(private_key: PrivateKey) -> PublicKey:
    return private_key.public_key()
