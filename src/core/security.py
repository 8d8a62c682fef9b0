"""
Token helpers for the API guard.

API tokens are random url-safe strings handed to the user once.  Only
their SHA-256 digest is stored, so a leaked database does not leak
usable credentials.  Clients send the token either as
``Authorization: Bearer <token>`` or as the ``api_token`` query
parameter.
"""

import hashlib
import secrets
from typing import Optional

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

TOKEN_BYTES = 45

bearer_scheme = HTTPBearer(auto_error=False)


def generate_token() -> str:
    """Return a new random plain-text API token."""
    return secrets.token_urlsafe(TOKEN_BYTES)


def hash_token(token: str) -> str:
    """SHA-256 hex digest under which a token is stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def get_credential(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    api_token: Optional[str] = Query(None, include_in_schema=False),
) -> Optional[str]:
    """Extract the raw credential from the request, bearer header first."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return api_token or None
