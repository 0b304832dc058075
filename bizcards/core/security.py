from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt
from typing import Optional
from bizcards.core.config import settings
import hashlib

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    password_bytes = password.encode("utf-8")
    digest = hashlib.sha256(password_bytes).hexdigest()
    return pwd_context.hash(digest)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    digest = hashlib.sha256(plain_password.encode("utf-8")).hexdigest()
    return pwd_context.verify(digest, hashed_password)


def build_claims(user: dict) -> dict:
    """The one claim bundle every issued token carries."""
    return {
        "sub": str(user["id"]),
        "isAdmin": bool(user.get("is_admin", False)),
        "isBusiness": bool(user.get("is_business", False)),
    }


def create_access_token(subject: str, claims: Optional[dict] = None,
                        expires_delta: Optional[timedelta] = None) -> str:
    to_encode = dict(claims or {})
    to_encode["sub"] = str(subject)
    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_MINUTES:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta:
        to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> dict:
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    return payload
