"""Signing and verification of Minisign signatures."""
from .signing import sign, sign_signature
from .verification import verify

__all__ = ["sign", "sign_signature", "verify"]
