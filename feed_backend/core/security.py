# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt at the configured work factor

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    settings = get_settings()
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def _signing_key() -> str:
    settings = get_settings()
    if not settings.jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not configured")
    return settings.jwt_secret_key


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub, email)

    Returns:
        Encoded JWT token string

    Raises:
        RuntimeError: If no signing secret is configured
    """
    settings = get_settings()
    signing_key = _signing_key()
    issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        signing_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is malformed, has a bad signature or is expired
        RuntimeError: If no signing secret is configured
    """
    settings = get_settings()
    signing_key = _signing_key()
    try:
        return jwt.decode(
            token,
            signing_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
