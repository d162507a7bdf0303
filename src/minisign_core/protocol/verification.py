"""Two-level signature verification.

The inner signature covers the message (or its BLAKE2b-512 digest for
prehashed signatures). The global signature covers the inner signature
followed by the trusted comment, so a trusted comment cannot be swapped
without the key.
"""
from __future__ import annotations

import structlog

from ..algorithms import ensure_public_key_algorithm, signed_payload
from ..armor import to_bytes
from ..crypto.ed25519 import Ed25519Signer
from ..exceptions import InvalidGlobalSignature, InvalidSignature, KeyMismatch
from ..models import PublicKey, Signature, format_key_id

log = structlog.get_logger(__name__)


def verify(public_key: PublicKey, message: bytes, signature: Signature) -> bool:
    """Verify ``signature`` over ``message``.

    Returns ``True`` when both checks pass; every failure raises a distinct
    :class:`~minisign_core.exceptions.MinisignError` subclass.
    """
    ensure_public_key_algorithm(public_key.algorithm)
    mode = signature.mode
    key_id = format_key_id(public_key.key_id)
    if public_key.key_id != signature.key_id:
        log.info("signature.rejected", key_id=key_id, reason="key_mismatch", signed_by=format_key_id(signature.key_id))
        raise KeyMismatch("Incompatible key identifiers")
    trusted_comment = signature.trusted_comment_text

    verifier = Ed25519Signer.from_public_bytes(public_key.key)
    if not verifier.verify(message=signed_payload(mode, message), signature=signature.signature):
        log.info("signature.rejected", key_id=key_id, reason="invalid_signature")
        raise InvalidSignature("Invalid signature")
    if not verifier.verify(
        message=signature.signature + to_bytes(trusted_comment),
        signature=signature.global_signature,
    ):
        log.info("signature.rejected", key_id=key_id, reason="invalid_global_signature")
        raise InvalidGlobalSignature("Invalid global signature")

    log.debug("signature.verified", key_id=key_id, mode=mode.name.lower())
    return True
