"""
Authentication endpoints.

Handles investor/syndicator registration, login, and token management.
"""

from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from equitymd.core.config import settings
from equitymd.core.security import (
    Token,
    create_access_token,
    get_password_hash,
    verify_password,
)
from equitymd.models.user import User, UserCreate, UserRead
from equitymd.api.deps import CurrentUser, DbSession

router = APIRouter()


async def _email_taken(db: AsyncSession, email: str) -> bool:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none() is not None


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register(user_in: UserCreate, db: DbSession):
    """
    Register a new investor or syndicator account.

    Raises:
        HTTPException: If email already registered.
    """
    if await _email_taken(db, user_in.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    user = User(
        email=user_in.email,
        full_name=user_in.full_name,
        user_type=user_in.user_type,
        hashed_password=get_password_hash(user_in.password),
    )

    db.add(user)
    await db.commit()
    await db.refresh(user)

    return user


@router.post("/login", response_model=Token)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: DbSession,
):
    """
    Authenticate user and return access token.

    Args:
        form_data: OAuth2 form with username (email) and password.
        db: Database session.

    Returns:
        Token: JWT access token.

    Raises:
        HTTPException: If credentials are invalid.
    """
    result = await db.execute(
        select(User).where(User.email == form_data.username)
    )
    user = result.scalar_one_or_none()

    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    access_token = create_access_token(
        data={
            "sub": user.id,
            "email": user.email,
            "is_admin": user.is_admin,
        },
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )

    return Token(access_token=access_token)


@router.get("/me", response_model=UserRead)
async def get_current_user_info(current_user: CurrentUser):
    """Get current authenticated user's profile."""
    return current_user


@router.post("/create-admin", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_first_admin(user_in: UserCreate, db: DbSession):
    """
    Create the first admin user.

    This endpoint only works if no admin users exist yet.
    Use this for initial setup.

    Raises:
        HTTPException: If an admin already exists or the email is taken.
    """
    result = await db.execute(
        select(User).where(User.is_admin == True).limit(1)  # noqa: E712
    )
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin user already exists. Use regular registration.",
        )

    if await _email_taken(db, user_in.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    user = User(
        email=user_in.email,
        full_name=user_in.full_name,
        user_type=user_in.user_type,
        hashed_password=get_password_hash(user_in.password),
        is_admin=True,
    )

    db.add(user)
    await db.commit()
    await db.refresh(user)

    return user
