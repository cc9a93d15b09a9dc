"""PKCE (Proof Key for Code Exchange) helpers.

Hosts generate a pair before redirecting, keep ``code_verifier`` in their
session, and pass it back on callback.
"""
from __future__ import annotations

import base64
import hashlib
import secrets
from dataclasses import dataclass


@dataclass(frozen=True)
class PkcePair:
    """PKCE codes for one authorization flow.

    Attributes:
        code_verifier: Random string kept by the host until the callback
        code_challenge: Derived value sent in the authorization request
        method: ``S256`` or ``plain``
    """
    code_verifier: str
    code_challenge: str
    method: str = "S256"


def compute_code_challenge(code_verifier: str) -> str:
    """S256 challenge: base64url(sha256(verifier)) without padding."""
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def generate_pkce_pair() -> PkcePair:
    # 64 random bytes -> 86 url-safe chars, inside RFC 7636's 43-128 range
    verifier = secrets.token_urlsafe(64)
    return PkcePair(code_verifier=verifier, code_challenge=compute_code_challenge(verifier))
