"""
Authentication service handling user registration, login and profile lookup.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from meetx.models.user import User
from meetx.schemas.user import UserCreate, UserLogin
from meetx.core.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from meetx.core.metrics import record_auth_attempt
from meetx.core.security import hash_password, verify_password
from meetx.core.logging import get_logger

logger = get_logger(__name__)


async def _find_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, user_data: UserCreate) -> User:
    """
    Register a new user with hashed password.
    Raises EmailAlreadyRegisteredError if the email is taken; the unique
    index on users.email decides when two registrations race.
    """
    if await _find_by_email(db, user_data.email):
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        record_auth_attempt("register", success=False)
        raise EmailAlreadyRegisteredError()

    user = User(
        name=user_data.name,
        email=user_data.email,
        phone=user_data.phone,
        hashed_password=hash_password(user_data.password),
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        if await _find_by_email(db, user_data.email) is None:
            raise
        logger.warning("registration_failed", reason="email_exists_race", email=user_data.email)
        record_auth_attempt("register", success=False)
        raise EmailAlreadyRegisteredError()

    logger.info("user_registered", user_id=user.id)
    record_auth_attempt("register", success=True)
    return user


async def authenticate_user(db: AsyncSession, login_data: UserLogin) -> User:
    """
    Check email and password.
    Unknown email and wrong password fail identically to avoid user enumeration.
    """
    user = await _find_by_email(db, login_data.email)

    if not user or not verify_password(login_data.password, user.hashed_password):
        logger.warning("login_failed", user_id=user.id if user else None, email=login_data.email)
        record_auth_attempt("login", success=False)
        raise InvalidCredentialsError()

    logger.info("user_logged_in", user_id=user.id)
    record_auth_attempt("login", success=True)
    return user


async def get_user(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if not user:
        raise UserNotFoundError()
    return user
