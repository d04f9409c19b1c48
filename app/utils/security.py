# app/utils/security.py
import base64
import hashlib
import hmac
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config.settings import settings
from app.schemas.tokens import TokenClaims

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class InvalidTokenError(Exception):
    """Raised when a bearer token fails signature, issuer, audience or expiry checks"""


def _legacy_digest(password: str) -> str:
    # Unsalted SHA-256, base64 encoded: the credential format of older user rows
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest()).decode("ascii")


def _is_legacy_digest(hashed_password: str) -> bool:
    return pwd_context.identify(hashed_password) is None


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    if _is_legacy_digest(hashed_password):
        return hmac.compare_digest(_legacy_digest(plain_password), hashed_password)
    return pwd_context.verify(plain_password, hashed_password)


def needs_rehash(hashed_password: str) -> bool:
    """True when the stored digest should be replaced after a successful login"""
    if _is_legacy_digest(hashed_password):
        return True
    return pwd_context.needs_update(hashed_password)


def create_access_token(user_id: int, email: str, name: str, role: str, expires_delta: timedelta = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "name": name,
        "role": role,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    try:
        return TokenClaims(
            id=int(payload["sub"]),
            email=payload["email"],
            name=payload["name"],
            role=payload["role"],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError("Token is missing identity claims") from e
