"""Text armor: comment lines framing base64 bodies.

Key files hold two lines, an untrusted comment and the key body. Signature
files hold four::

    untrusted comment: <free text>
    <base64(algorithm || key id || signature)>
    trusted comment: <free text>
    <base64(global signature)>
"""
from __future__ import annotations

from typing import Union

from .codec import (
    decode_private_key,
    decode_public_key,
    decode_signature,
    encode_global_signature,
    encode_private_key,
    encode_public_key,
    encode_signature,
)
from .exceptions import FormatError, MultilineComment
from .models import (
    TRUSTED_COMMENT_PREFIX,
    UNTRUSTED_COMMENT_PREFIX,
    PrivateKey,
    PublicKey,
    Signature,
    format_key_id,
)

Text = Union[str, bytes]


def to_text(value: Text) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="surrogateescape")
    return value


def to_bytes(value: str) -> bytes:
    return value.encode("utf-8", errors="surrogateescape")


def is_single_line(comment: str) -> bool:
    """A comment fits on one line unless a line feed precedes further content."""
    index = comment.find("\n")
    return index < 0 or index == len(comment) - 1


def ensure_single_line(comment: str, what: str) -> str:
    """Validate ``comment`` and drop a tolerated trailing line terminator."""
    if not is_single_line(comment):
        raise MultilineComment(f"{what.capitalize()} must fit on a single line")
    return comment.rstrip("\n").rstrip("\r")


def _trim_cr(line: str) -> str:
    return line.rstrip("\r")


def _key_body(text: Text, what: str) -> str:
    lines = to_text(text).split("\n", 1)
    if len(lines) < 2:
        raise FormatError(f"Incomplete encoded {what}")
    return lines[1]


def parse_public_key(text: Text) -> PublicKey:
    return decode_public_key(_key_body(text, "public key"))


def parse_private_key(text: Text) -> PrivateKey:
    return decode_private_key(_key_body(text, "secret key"))


def parse_signature(text: Text) -> Signature:
    lines = to_text(text).split("\n", 3)
    if len(lines) < 4:
        raise FormatError("Incomplete encoded signature")
    algorithm, key_id, signature, global_signature = decode_signature(lines[1], lines[3])
    return Signature(
        untrusted_comment=_trim_cr(lines[0]),
        algorithm=algorithm,
        key_id=key_id,
        signature=signature,
        trusted_comment=_trim_cr(lines[2]),
        global_signature=global_signature,
    )


def armor_signature(
    untrusted_comment: str,
    algorithm: bytes,
    key_id: bytes,
    signature: bytes,
    trusted_comment: str,
    global_signature: bytes,
) -> bytes:
    """Frame a freshly produced signature; comments are given without prefixes."""
    out = (
        f"{UNTRUSTED_COMMENT_PREFIX}{untrusted_comment}\n"
        f"{encode_signature(algorithm, key_id, signature)}\n"
        f"{TRUSTED_COMMENT_PREFIX}{trusted_comment}\n"
        f"{encode_global_signature(global_signature)}\n"
    )
    return to_bytes(out)


def dump_signature(signature: Signature) -> str:
    """Re-emit a parsed signature, comment lines verbatim."""
    for comment in (signature.untrusted_comment, signature.trusted_comment):
        if "\n" in comment:
            raise MultilineComment("Signature comment lines must not contain line breaks")
    return (
        f"{signature.untrusted_comment}\n"
        f"{encode_signature(signature.algorithm, signature.key_id, signature.signature)}\n"
        f"{signature.trusted_comment}\n"
        f"{encode_global_signature(signature.global_signature)}\n"
    )


def _dump_key(body: str, comment: str) -> str:
    comment = ensure_single_line(comment, "untrusted comment")
    return f"{UNTRUSTED_COMMENT_PREFIX}{comment}\n{body}\n"


def dump_public_key(key: PublicKey, untrusted_comment: str | None = None) -> str:
    comment = untrusted_comment or f"minisign public key {format_key_id(key.key_id)}"
    return _dump_key(encode_public_key(key), comment)


def dump_private_key(key: PrivateKey, untrusted_comment: str | None = None) -> str:
    comment = untrusted_comment or "minisign secret key"
    return _dump_key(encode_private_key(key), comment)


__all__ = [
    "armor_signature",
    "dump_private_key",
    "dump_public_key",
    "dump_signature",
    "ensure_single_line",
    "is_single_line",
    "parse_private_key",
    "parse_public_key",
    "parse_signature",
    "to_bytes",
    "to_text",
]
