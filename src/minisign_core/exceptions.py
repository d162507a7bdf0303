"""Central exception hierarchy"""
from __future__ import annotations


class MinisignError(Exception):
    """Base exception for all failures"""


class FormatError(MinisignError):
    """Raised when armored text or a binary record is malformed or truncated"""


class UnsupportedAlgorithm(MinisignError):
    """Raised for an unrecognized signature or private key algorithm tag"""


class IncompatibleAlgorithm(MinisignError):
    """Raised when a public key is not an Ed25519 key"""


class KeyMismatch(MinisignError):
    """Raised when the signature was made by a different key id"""


class MalformedComment(MinisignError):
    """Raised when the trusted comment line lacks its prefix"""


class VerificationError(MinisignError):
    """Raised when a signature check fails"""


class InvalidSignature(VerificationError):
    """Raised when the signature over the message does not verify"""


class InvalidGlobalSignature(VerificationError):
    """Raised when the signature over the trusted comment does not verify"""


class CommentError(MinisignError):
    """Raised when a comment cannot be framed into a signature file"""


class MissingComment(CommentError):
    """Raised when the untrusted comment is empty"""


class MultilineComment(CommentError):
    """Raised when a comment does not fit on a single line"""


class InvalidKeyMaterial(MinisignError):
    """Raised when the secret key halves disagree, e.g. for a still-encrypted key"""


__all__ = [
    "MinisignError",
    "FormatError",
    "UnsupportedAlgorithm",
    "IncompatibleAlgorithm",
    "KeyMismatch",
    "MalformedComment",
    "VerificationError",
    "InvalidSignature",
    "InvalidGlobalSignature",
    "CommentError",
    "MissingComment",
    "MultilineComment",
    "InvalidKeyMaterial",
]
