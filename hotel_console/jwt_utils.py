"""
JWT token utilities

The console does not sign tokens; it only inspects the credential issued by
the Hotel API, whose signing key it does not hold.
"""
from datetime import datetime, timezone
from typing import Optional, Dict
import jwt


def is_jwt_format(token: Optional[str]) -> bool:
    """Check that a token has the three dot-separated JWT segments"""
    return bool(token) and len(token.split(".")) == 3


def get_token_claims(token: str) -> Optional[Dict]:
    """
    Read the claims of a token without verifying its signature

    Args:
        token: JWT token string

    Returns:
        Claims dictionary, or None if the token cannot be decoded
    """
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        return None


def get_token_expiration(token: str) -> Optional[datetime]:
    """
    Get token expiration time without full validation

    Args:
        token: JWT token string

    Returns:
        Expiration datetime, or None if the token is invalid or never expires
    """
    payload = get_token_claims(token)
    if not payload:
        return None
    exp = payload.get("exp")
    if exp is None:
        return None
    try:
        return datetime.fromtimestamp(exp, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return None


def is_token_expired(token: str) -> bool:
    """
    Check if token is expired

    Args:
        token: JWT token string

    Returns:
        True if expired, False if it has no expiry or has not expired yet
    """
    exp = get_token_expiration(token)
    if exp is None:
        return False
    return datetime.now(timezone.utc) >= exp
