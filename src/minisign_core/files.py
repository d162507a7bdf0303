"""Read and write key and signature files.

Files are read whole; the message is buffered in memory before verifying.
"""
from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import structlog

from .armor import dump_public_key, parse_private_key, parse_public_key, parse_signature, to_text
from .config import AppConfig, load_config
from .models import PrivateKey, PublicKey, Signature
from .protocol.signing import Clock, default_trusted_comment, sign
from .protocol.verification import verify

log = structlog.get_logger(__name__)


def _read_text(path: Path) -> str:
    return to_text(Path(path).read_bytes())


def read_public_key(path: Path) -> PublicKey:
    return parse_public_key(_read_text(path))


def read_private_key(path: Path) -> PrivateKey:
    return parse_private_key(_read_text(path))


def read_signature(path: Path) -> Signature:
    return parse_signature(_read_text(path))


def verify_file(public_key: PublicKey, path: Path, signature: Signature) -> bool:
    return verify(public_key, Path(path).read_bytes(), signature)


def signature_path_for(path: Path, config: AppConfig | None = None) -> Path:
    config = config or load_config()
    path = Path(path)
    return path.with_name(path.name + config.signing.signature_suffix)


def sign_file(
    private_key: PrivateKey,
    path: Path,
    untrusted_comment: Optional[str] = None,
    trusted_comment: str = "",
    *,
    signature_path: Optional[Path] = None,
    config: AppConfig | None = None,
    clock: Clock = time.time,
) -> Path:
    """Sign ``path`` and write the signature next to it.

    Without an explicit trusted comment the file name is recorded alongside
    the timestamp, as ``timestamp:<seconds>\\tfile:<name>``.
    """
    config = config or load_config()
    path = Path(path)
    if untrusted_comment is None:
        untrusted_comment = config.signing.default_untrusted_comment
    if not trusted_comment:
        trusted_comment = f"{default_trusted_comment(clock)}\tfile:{path.name}"

    armored = sign(private_key, path.read_bytes(), untrusted_comment, trusted_comment, clock=clock)
    target = Path(signature_path) if signature_path else signature_path_for(path, config)
    target.write_bytes(armored)
    log.info("signature.written", path=str(target))
    return target


def write_public_key(path: Path, public_key: PublicKey, untrusted_comment: Optional[str] = None) -> Path:
    path = Path(path)
    path.write_bytes(dump_public_key(public_key, untrusted_comment).encode("utf-8", errors="surrogateescape"))
    return path


__all__ = [
    "read_private_key",
    "read_public_key",
    "read_signature",
    "sign_file",
    "signature_path_for",
    "verify_file",
    "write_public_key",
]
