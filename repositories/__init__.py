"""
Repositories module - Data Access Layer.

Provides repository classes for database operations following the Repository pattern.
Each repository handles CRUD operations for a specific domain entity.

Usage:
    from repositories import AccountRepository, ResumeRepository

    # Initialize with a database session
    account_repo = AccountRepository(db_session)
    resume_repo = ResumeRepository(db_session)

    # Use repository methods
    account = account_repo.get_by_email(email)
    resume = resume_repo.get_owned(resume_id, account_id)
"""

from repositories.base_repository import BaseRepository
from repositories.account_repository import AccountRepository
from repositories.resume_repository import ResumeRepository

__all__ = [
    "BaseRepository",
    "AccountRepository",
    "ResumeRepository",
]
