# =============================================
# certifica/core/security.py
# =============================================
"""Security utilities for authentication and authorization"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from certifica.config.settings import get_settings
from certifica.core.exceptions import InvalidTokenError

# Get settings
settings = get_settings()

# =============================================
# PASSWORD HASHING
# =============================================
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a salted bcrypt hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False

def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)

# Hash of a throwaway password; verified against when the username is unknown
# so both failure paths cost the same bcrypt round.
DUMMY_PASSWORD_HASH = get_password_hash("certifica-dummy-password")

# =============================================
# JWT TOKEN MANAGEMENT
# =============================================

def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    now = datetime.now(timezone.utc)

    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({
        "exp": expire,
        "iat": now,
        "type": "access"
    })

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def verify_token(token: str) -> Dict[str, Any]:
    """Verify and decode a JWT token; expiry is checked by jose"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise InvalidTokenError()

    if payload.get("type") != "access" or not payload.get("sub"):
        raise InvalidTokenError()

    return payload
