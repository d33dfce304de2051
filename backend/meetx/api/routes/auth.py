"""
Authentication endpoints: register, login and current profile.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from meetx.db.session import get_db
from meetx.models.user import User
from meetx.schemas.user import AuthResponse, UserCreate, UserLogin, UserResponse
from meetx.services.auth_service import authenticate_user, get_user, register_user
from meetx.core.security import TokenService, get_current_user_id, get_token_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _auth_response(user: User, tokens: TokenService) -> AuthResponse:
    return AuthResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        access_token=tokens.issue(user.id),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Register a new user account and receive a token right away."""
    user = await register_user(db, user_data)
    return _auth_response(user, tokens)


@router.post("/login", response_model=AuthResponse)
async def login(
    login_data: UserLogin,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Authenticate and receive a JWT access token."""
    user = await authenticate_user(db, login_data)
    return _auth_response(user, tokens)


@router.get("/me", response_model=UserResponse)
async def me(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Profile of the authenticated user."""
    return await get_user(db, user_id)
