"""
Password hashing, session tokens and the request authorization guard.

Passwords are hashed with bcrypt (per-call random salt embedded in the digest).
Sessions are stateless HS256 JWTs carrying the user id and an expiry; there is
no revocation list, so rotating SECRET_KEY invalidates every issued token.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import bcrypt
import jwt
import structlog
from fastapi import Depends, Header, Request

from meetx.core.config import get_settings
from meetx.core.exceptions import (
    ExpiredTokenError,
    MalformedTokenError,
    PasswordHashError,
    TamperedTokenError,
    TokenError,
    UnauthenticatedError,
)
from meetx.core.logging import get_logger
from meetx.core.metrics import record_token_rejection

logger = get_logger(__name__)

BCRYPT_ROUNDS = 12
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """
    Check a password against a stored digest.
    Returns False on mismatch; raises PasswordHashError when the stored
    digest is not a bcrypt hash at all.
    """
    candidate = plain_password.encode("utf-8")
    if len(candidate) > BCRYPT_MAX_BYTES:
        # Registration caps passwords at the bcrypt limit, so this can never match
        return False
    try:
        return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
    except ValueError as exc:
        raise PasswordHashError("Stored password hash is corrupted") from exc


@dataclass(frozen=True)
class TokenService:
    """Issues and verifies signed, expiring session tokens."""

    secret: str
    algorithm: str = "HS256"
    ttl_seconds: int = 3600

    def issue(self, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=self.ttl_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """
        Resolve a token to the user id it was issued for.

        Signature is checked before expiry, so a forged token that also
        happens to be stale is reported as tampered.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.InvalidSignatureError as exc:
            raise TamperedTokenError() from exc
        except jwt.ExpiredSignatureError as exc:
            raise ExpiredTokenError() from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedTokenError() from exc

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise MalformedTokenError() from exc


@lru_cache()
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        ttl_seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS,
    )


def create_access_token(user_id: int) -> str:
    return get_token_service().issue(user_id)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Pull the token out of an `Authorization: Bearer <token>` header value."""
    if not authorization:
        raise UnauthenticatedError()
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthenticatedError()
    return token


async def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """
    FastAPI dependency guarding authenticated routes.

    Stateless: the user table is not consulted, a valid token is enough.
    """
    try:
        token = extract_bearer_token(authorization)
    except UnauthenticatedError:
        record_token_rejection("missing")
        raise

    try:
        user_id = tokens.verify(token)
    except TokenError as exc:
        record_token_rejection(exc.reason)
        logger.warning("token_rejected", reason=exc.reason)
        raise UnauthenticatedError() from exc

    request.state.user_id = user_id
    structlog.contextvars.bind_contextvars(user_id=user_id)
    return user_id
