"""
User (profile) model for authentication and authorization.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserType(str, Enum):
    """Marketplace account type."""
    INVESTOR = "investor"
    SYNDICATOR = "syndicator"


class UserBase(SQLModel):
    """Base user fields shared across schemas."""
    email: str = Field(unique=True, index=True)
    full_name: Optional[str] = None
    user_type: UserType = UserType.INVESTOR
    is_active: bool = True
    is_admin: bool = False


class User(UserBase, table=True):
    """
    User database model.

    Attributes:
        id: Primary key.
        email: Unique email address.
        full_name: Optional display name.
        user_type: Investor or syndicator account.
        hashed_password: Bcrypt hashed password.
        is_active: Whether user can log in. Deactivated accounts are
            listed on the admin "deactivated" panel.
        is_admin: Grants access to the admin dashboard.
        created_at: Account creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    hashed_password: str
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class UserCreate(SQLModel):
    """Schema for creating a new user."""
    email: str
    password: str
    full_name: Optional[str] = None
    user_type: UserType = UserType.INVESTOR


class UserRead(UserBase):
    """Schema for reading user data (no password)."""
    id: int
    created_at: datetime
