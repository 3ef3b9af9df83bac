"""
Account repository for account and account profile persistence.

Accounts and their profiles are written together in a single transaction.
"""

from datetime import datetime
from typing import Optional, Tuple
from sqlmodel import Session, select

from models.account import Account, AccountProfile, Role
from repositories.base_repository import BaseRepository
from utils.clock import utc_now


class AccountRepository(BaseRepository[Account]):
    """Repository for managing accounts and their profiles."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Account)

    def get_by_email(self, email: str) -> Optional[Account]:
        """
        Find an account by exact email.

        Args:
            email: Email as stored (case-sensitive)

        Returns:
            Account or None
        """
        query = select(Account).where(Account.email == email)
        return self.db.exec(query).first()

    def get_with_profile(self, account_id: int) -> Optional[Tuple[Account, AccountProfile]]:
        """
        Get an account joined with its profile.

        Args:
            account_id: Account primary key

        Returns:
            (Account, AccountProfile) tuple, or None if either row is missing
        """
        query = (
            select(Account, AccountProfile)
            .join(AccountProfile, AccountProfile.account_id == Account.account_id)
            .where(Account.account_id == account_id)
        )
        return self.db.exec(query).first()

    def create_with_profile(
        self,
        account: Account,
        role: Role = Role.APPLICANT,
        created_at: Optional[datetime] = None,
    ) -> Tuple[Account, AccountProfile]:
        """
        Create an account and its profile atomically.

        Both rows are committed together; on any failure the transaction is
        rolled back so no account is left without a profile.

        Args:
            account: New account (password already hashed)
            role: Role for the profile
            created_at: Timestamp for both profile timestamps (defaults to now)

        Returns:
            (Account, AccountProfile) tuple

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already taken
        """
        now = created_at or utc_now()
        try:
            self.db.add(account)
            self.db.flush()  # assigns account_id

            profile = AccountProfile(
                account_id=account.account_id,
                role=role.value,
                created_at=now,
                updated_at=now,
            )
            self.db.add(profile)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(account)
        self.db.refresh(profile)
        return account, profile
