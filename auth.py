import jwt
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader
from passlib.context import CryptContext
from config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES, PASSWORD_HASH_ROUNDS
from errors import AuthError

logger = logging.getLogger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=PASSWORD_HASH_ROUNDS)
# the raw token is sent as the whole header value, without a "Bearer " prefix
token_header = APIKeyHeader(name="Authorization", auto_error=False, description="Raw session token returned by /signin.")

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"id": str(user_id), "iat": now, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM], options={"require": ["exp"]})
    except jwt.ExpiredSignatureError:
        logger.warning("Rejected expired session token")
        return None
    except jwt.PyJWTError as e:
        logger.warning("JWT decode error: %s", e)
        return None

def resolve_user_id(token: Optional[str]) -> int:
    """Verify a session token and return the user id it was issued for.

    Raises ``AuthError`` when the token is missing, has a bad signature, has
    expired, or does not carry an object payload with an integer ``id``.
    """
    if not token:
        raise AuthError()
    payload = decode_access_token(token)
    if not isinstance(payload, dict) or payload.get("id") is None:
        raise AuthError()
    try:
        return int(payload["id"])
    except (TypeError, ValueError):
        logger.warning("Session token carries a malformed user id")
        raise AuthError()

async def get_current_user_id(token: Optional[str] = Depends(token_header)) -> int:
    return resolve_user_id(token)
