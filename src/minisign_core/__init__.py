"""Minisign key and signature files, signing and verification."""
from .armor import (
    armor_signature,
    dump_private_key,
    dump_public_key,
    dump_signature,
    parse_private_key,
    parse_public_key,
    parse_signature,
)
from .algorithms import SignatureMode
from .codec import decode_private_key, decode_public_key, decode_signature
from .exceptions import (
    CommentError,
    FormatError,
    IncompatibleAlgorithm,
    InvalidGlobalSignature,
    InvalidKeyMaterial,
    InvalidSignature,
    KeyMismatch,
    MalformedComment,
    MinisignError,
    MissingComment,
    MultilineComment,
    UnsupportedAlgorithm,
    VerificationError,
)
from .models import TRUSTED_COMMENT_PREFIX, PrivateKey, PublicKey, Signature
from .protocol import sign, sign_signature, verify
from .version import __version__

__all__ = [
    "__version__",
    "TRUSTED_COMMENT_PREFIX",
    "SignatureMode",
    "PrivateKey",
    "PublicKey",
    "Signature",
    "armor_signature",
    "decode_private_key",
    "decode_public_key",
    "decode_signature",
    "dump_private_key",
    "dump_public_key",
    "dump_signature",
    "parse_private_key",
    "parse_public_key",
    "parse_signature",
    "sign",
    "sign_signature",
    "verify",
    "CommentError",
    "FormatError",
    "IncompatibleAlgorithm",
    "InvalidGlobalSignature",
    "InvalidKeyMaterial",
    "InvalidSignature",
    "KeyMismatch",
    "MalformedComment",
    "MinisignError",
    "MissingComment",
    "MultilineComment",
    "UnsupportedAlgorithm",
    "VerificationError",
]
