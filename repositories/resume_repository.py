"""
Resume repository for resume persistence.

Every lookup that returns a single resume is constrained by both the resume
id and the owning account id in one query.
"""

from typing import List, Optional, Tuple
from sqlmodel import Session, select

from models.account import Account
from models.resume import Resume
from repositories.base_repository import BaseRepository


class ResumeRepository(BaseRepository[Resume]):
    """Repository for managing resumes."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Resume)

    def get_owned(self, resume_id: int, account_id: int) -> Optional[Resume]:
        """
        Get a resume only if it belongs to the account.

        Args:
            resume_id: Resume primary key
            account_id: Caller's account id

        Returns:
            Resume if found and owned, None otherwise
        """
        statement = select(Resume).where(
            Resume.resume_id == resume_id,
            Resume.account_id == account_id
        )
        return self.db.exec(statement).first()

    def get_owned_with_owner_name(
        self,
        resume_id: int,
        account_id: int
    ) -> Optional[Tuple[Resume, str]]:
        """Same as get_owned, joined with the owner's display name."""
        statement = (
            select(Resume, Account.name)
            .join(Account, Account.account_id == Resume.account_id)
            .where(Resume.resume_id == resume_id)
            .where(Resume.account_id == account_id)
        )
        return self.db.exec(statement).first()

    def list_by_account(
        self,
        account_id: int,
        ascending: bool = False
    ) -> List[Tuple[Resume, str]]:
        """
        Get all resumes of an account with the owner's name.

        Args:
            account_id: Owner account id
            ascending: Order by created_at ASC instead of DESC

        Returns:
            List of (Resume, owner name) tuples
        """
        statement = (
            select(Resume, Account.name)
            .join(Account, Account.account_id == Resume.account_id)
            .where(Resume.account_id == account_id)
        )

        if ascending:
            statement = statement.order_by(Resume.created_at.asc(), Resume.resume_id.asc())
        else:
            statement = statement.order_by(Resume.created_at.desc(), Resume.resume_id.desc())

        return list(self.db.exec(statement).all())
