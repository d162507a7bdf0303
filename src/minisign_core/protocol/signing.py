from __future__ import annotations

import time
from typing import Callable

import structlog

from ..algorithms import SignatureMode, ensure_private_key_algorithm
from ..armor import armor_signature, ensure_single_line, parse_signature, to_bytes
from ..crypto.ed25519 import Ed25519Signer
from ..exceptions import MissingComment
from ..models import PrivateKey, Signature, format_key_id

log = structlog.get_logger(__name__)

Clock = Callable[[], float]


def default_trusted_comment(clock: Clock = time.time) -> str:
    return f"timestamp:{int(clock())}"


def sign(
    private_key: PrivateKey,
    message: bytes,
    untrusted_comment: str,
    trusted_comment: str = "",
    *,
    clock: Clock = time.time,
) -> bytes:
    """Sign ``message`` and return the armored signature file.

    Signatures are always produced in standard mode. An empty trusted
    comment is replaced by the current timestamp.
    """
    ensure_private_key_algorithm(private_key.algorithm)
    signer = Ed25519Signer.from_secret_key(private_key.key)
    signature = signer.sign(message=message)

    if not untrusted_comment:
        raise MissingComment("Missing untrusted comment")
    untrusted_comment = ensure_single_line(untrusted_comment, "untrusted comment")

    if not trusted_comment:
        trusted_comment = default_trusted_comment(clock)
    trusted_comment = ensure_single_line(trusted_comment, "trusted comment")

    global_signature = signer.sign(message=signature + to_bytes(trusted_comment))
    log.debug("signature.created", key_id=format_key_id(private_key.key_id), size=len(message))
    return armor_signature(
        untrusted_comment,
        SignatureMode.STANDARD.tag,
        private_key.key_id,
        signature,
        trusted_comment,
        global_signature,
    )


def sign_signature(
    private_key: PrivateKey,
    message: bytes,
    untrusted_comment: str,
    trusted_comment: str = "",
    *,
    clock: Clock = time.time,
) -> Signature:
    """Like :func:`sign` but return the parsed record."""
    return parse_signature(sign(private_key, message, untrusted_comment, trusted_comment, clock=clock))
