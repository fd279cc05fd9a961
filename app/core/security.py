from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
import bcrypt

DEMO_TOKEN_PREFIX = "demo-token"
DEMO_TOKEN_MIN_LENGTH = 10


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    """Hash a password"""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def create_access_token(
    user_id: str,
    username: str,
    email: str,
    role: str,
    secret: str,
    algorithm: str = "HS256",
    issuer: str = "api-iras",
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed JWT carrying the user identity claims"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=24))
    to_encode = {
        "user_id": str(user_id),
        "username": username,
        "email": email,
        "role": role,
        "exp": expire,
        "iat": now,
        "nbf": now,
        "iss": issuer,
    }
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256", issuer: Optional[str] = None) -> Optional[dict]:
    """Decode and verify a JWT token"""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm], issuer=issuer)
    except JWTError:
        return None
    if not payload.get("user_id") or not payload.get("role"):
        return None
    return payload


def is_demo_token(token: str) -> bool:
    return token.startswith(DEMO_TOKEN_PREFIX) and len(token) >= DEMO_TOKEN_MIN_LENGTH
