from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from utils.clock import utc_now


class Role(str, Enum):
    """Account roles. Sign-up always assigns APPLICANT."""
    APPLICANT = "APPLICANT"
    RECRUITER = "RECRUITER"


class Account(SQLModel, table=True):
    """Registered identity with login credentials."""

    __tablename__ = "accounts"

    account_id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, nullable=False, sa_column_kwargs={"unique": True})
    password_hash: str = Field(nullable=False)
    name: str = Field(nullable=False)


class AccountProfile(SQLModel, table=True):
    """Role and audit metadata, exactly one row per account."""

    __tablename__ = "account_profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    account_id: int = Field(foreign_key="accounts.account_id", nullable=False, unique=True)
    role: str = Field(default=Role.APPLICANT.value, nullable=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False)
