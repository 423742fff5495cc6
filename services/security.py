"""
Password hashing and access tokens.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt
from passlib.context import CryptContext

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     try:
          return pwd_context.verify(password, hashed)
     except ValueError:
          # Stored value is not a recognised hash
          return False


def create_access_token(
     claims: Dict[str, Any],
     secret: str,
     algorithm: str = "HS256",
     expires_minutes: int = 60,
) -> str:
     payload = dict(claims)
     payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
     return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
     """
     Decode and verify a token.

     Raises:
          JWTError: If the signature is invalid or the token has expired.
     """
     return jwt.decode(token, secret, algorithms=[algorithm])


__all__ = [
     "JWTError",
     "pwd_context",
     "hash_password",
     "verify_password",
     "create_access_token",
     "decode_access_token",
]
