from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Text

from utils.clock import utc_now


class ResumeStatus(str, Enum):
    """Application lifecycle of a resume. New resumes start at APPLY."""
    APPLY = "APPLY"
    DROP = "DROP"
    PASS = "PASS"
    INTERVIEW1 = "INTERVIEW1"
    INTERVIEW2 = "INTERVIEW2"
    FINAL_PASS = "FINAL_PASS"


class Resume(SQLModel, table=True):
    """
    Resume owned by a single account.

    The owner is fixed at creation. Status is stored as plain text so
    later lifecycle transitions don't need a schema change.
    """
    __tablename__ = "resumes"

    resume_id: Optional[int] = Field(default=None, primary_key=True)
    account_id: int = Field(foreign_key="accounts.account_id", index=True, nullable=False)

    title: str = Field(nullable=False)
    content: str = Field(sa_column=Column(Text, nullable=False))
    status: str = Field(default=ResumeStatus.APPLY.value, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
