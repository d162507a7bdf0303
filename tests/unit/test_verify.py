from dataclasses import replace

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from structlog.testing import capture_logs

from minisign_core.armor import parse_signature
from minisign_core.codec import decode_public_key
from minisign_core.crypto.hasher import blake2b_512
from minisign_core.exceptions import (
    IncompatibleAlgorithm,
    InvalidGlobalSignature,
    InvalidSignature,
    KeyMismatch,
    MalformedComment,
    UnsupportedAlgorithm,
    VerificationError,
)
from minisign_core.models import PublicKey, Signature
from minisign_core.protocol import verify


@pytest.fixture
def public_key(reference_public_key: str) -> PublicKey:
    return decode_public_key(reference_public_key)


@pytest.fixture
def signature(reference_signature: str) -> Signature:
    return parse_signature(reference_signature)


def test_verify_reference_signature(public_key: PublicKey, signature: Signature) -> None:
    assert verify(public_key, b"test", signature) is True


def test_verify_reference_prehashed_signature(public_key: PublicKey, reference_prehashed_signature: str) -> None:
    assert verify(public_key, b"test", parse_signature(reference_prehashed_signature)) is True


def test_prehashed_signature_does_not_verify_as_standard(
    public_key: PublicKey, reference_prehashed_signature: str
) -> None:
    prehashed = parse_signature(reference_prehashed_signature)
    with pytest.raises(InvalidSignature):
        verify(public_key, b"test", replace(prehashed, algorithm=b"Ed"))


def test_modified_message_fails_inner_check(public_key: PublicKey, signature: Signature) -> None:
    with pytest.raises(InvalidSignature):
        verify(public_key, b"tesT", signature)


def test_modified_trusted_comment_fails_global_check(public_key: PublicKey, signature: Signature) -> None:
    tampered = replace(signature, trusted_comment=signature.trusted_comment.replace("1635442742", "1635442743"))
    with pytest.raises(InvalidGlobalSignature):
        verify(public_key, b"test", tampered)


def test_untrusted_comment_is_not_authenticated(public_key: PublicKey, signature: Signature) -> None:
    relabelled = replace(signature, untrusted_comment="untrusted comment: anything goes")
    assert verify(public_key, b"test", relabelled) is True


def test_trusted_comment_requires_prefix(public_key: PublicKey, signature: Signature) -> None:
    stripped = replace(signature, trusted_comment=signature.trusted_comment_text)
    with pytest.raises(MalformedComment):
        verify(public_key, b"test", stripped)


def test_key_mismatch_is_reported_before_crypto(
    public_key: PublicKey, signature: Signature, monkeypatch: pytest.MonkeyPatch
) -> None:
    class _Unreachable:
        @classmethod
        def from_public_bytes(cls, data: bytes) -> None:
            raise AssertionError("cryptographic check ran")

    monkeypatch.setattr("minisign_core.protocol.verification.Ed25519Signer", _Unreachable)
    with pytest.raises(KeyMismatch):
        verify(replace(public_key, key_id=bytes(8)), b"test", signature)


def test_public_key_must_be_ed25519(public_key: PublicKey, signature: Signature) -> None:
    with pytest.raises(IncompatibleAlgorithm):
        verify(replace(public_key, algorithm=b"ED"), b"test", signature)


def test_incompatible_key_reported_before_unsupported_signature(public_key: PublicKey, signature: Signature) -> None:
    with pytest.raises(IncompatibleAlgorithm):
        verify(replace(public_key, algorithm=b"XX"), b"test", replace(signature, algorithm=b"XX"))


def test_unsupported_signature_algorithm_before_key_mismatch(public_key: PublicKey, signature: Signature) -> None:
    with pytest.raises(UnsupportedAlgorithm):
        verify(public_key, b"test", replace(signature, algorithm=b"Ex", key_id=bytes(8)))


def test_verification_failures_share_a_base(public_key: PublicKey, signature: Signature) -> None:
    with pytest.raises(VerificationError):
        verify(public_key, b"other", signature)


def test_prehashed_signature_with_generated_key() -> None:
    secret = Ed25519PrivateKey.generate()
    key_id = b"prehash!"
    message = b"a large release archive" * 100
    inner = secret.sign(blake2b_512(message))
    comment = "timestamp:1\tfile:archive\thashed"
    signature = Signature(
        untrusted_comment="untrusted comment: signature from minisign secret key",
        algorithm=b"ED",
        key_id=key_id,
        signature=inner,
        trusted_comment=f"trusted comment: {comment}",
        global_signature=secret.sign(inner + comment.encode("utf-8")),
    )
    public_key = PublicKey(algorithm=b"Ed", key_id=key_id, key=secret.public_key().public_bytes_raw())
    assert verify(public_key, message, signature) is True
    with pytest.raises(InvalidSignature):
        verify(public_key, message, replace(signature, algorithm=b"Ed"))


def test_rejections_are_logged(public_key: PublicKey, signature: Signature) -> None:
    with capture_logs() as entries:
        with pytest.raises(InvalidSignature):
            verify(public_key, b"nope", signature)
    assert entries[-1]["event"] == "signature.rejected"
    assert entries[-1]["reason"] == "invalid_signature"
    assert entries[-1]["log_level"] == "info"
