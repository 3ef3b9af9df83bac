"""
Authentication Service - Business Logic Layer.

Owns account registration, sign-in and identity lookup:
- Ordered input validation (first failing rule wins, nothing is written first)
- Password hashing through CredentialStore
- Atomic Account + AccountProfile creation
- Token issuance through TokenService

Hashing and every repository call run in the threadpool so a slow bcrypt
round never blocks unrelated requests on the event loop.
"""

import logging
import re
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from models.account import Account, AccountProfile, Role
from repositories import AccountRepository
from services.exceptions import (
    EmailAlreadyExists,
    InvalidCredentials,
    InvalidEmailFormat,
    MissingEmail,
    MissingFields,
    MissingPassword,
    NotFound,
    PasswordMismatch,
    PasswordTooLong,
    PasswordTooShort,
)
from utils.credential_store import CredentialStore, password_fits
from utils.token_service import TokenService

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 6


def is_valid_email(email: str) -> bool:
    """Check the local@domain.tld shape (no whitespace, single @)."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def account_view(account: Account, profile: AccountProfile) -> Dict[str, Any]:
    """Public representation of an account; never includes the password hash."""
    return {
        "account_id": account.account_id,
        "email": account.email,
        "name": account.name,
        "role": profile.role,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }


class AuthenticationService:
    """
    Application service for sign-up, sign-in and "who am I".

    Holds no state of its own beyond its collaborators.
    """

    def __init__(
        self,
        db_session: Session,
        token_service: TokenService,
        credential_store: Optional[CredentialStore] = None,
    ):
        self.db = db_session
        self.token_service = token_service
        self.credential_store = credential_store or CredentialStore()
        self.account_repo = AccountRepository(db_session)

    # ============ SIGN UP ============

    async def sign_up(
        self,
        email: Optional[str],
        password: Optional[str],
        password_confirm: Optional[str],
        name: Optional[str],
    ) -> Dict[str, Any]:
        """
        Register a new account with an APPLICANT profile.

        Returns:
            Account view dict (account_id, email, name, role, created_at, updated_at)

        Raises:
            MissingFields, InvalidEmailFormat, EmailAlreadyExists,
            PasswordTooShort, PasswordTooLong, PasswordMismatch
        """
        if not email or not password or not password_confirm or not name:
            raise MissingFields()

        if not is_valid_email(email):
            raise InvalidEmailFormat()

        existing = await run_in_threadpool(self.account_repo.get_by_email, email)
        if existing:
            raise EmailAlreadyExists()

        if len(password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShort()

        if not password_fits(password):
            raise PasswordTooLong()

        if password != password_confirm:
            raise PasswordMismatch()

        password_hash = await run_in_threadpool(self.credential_store.hash, password)
        account = Account(email=email, password_hash=password_hash, name=name)

        try:
            account, profile = await run_in_threadpool(
                self.account_repo.create_with_profile, account, Role.APPLICANT
            )
        except IntegrityError:
            # Lost a race with a concurrent sign-up for the same email
            logger.info("Sign-up rejected by unique constraint on email")
            raise EmailAlreadyExists()

        logger.info(f"Account {account.account_id} registered")
        return account_view(account, profile)

    # ============ SIGN IN ============

    async def sign_in(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Authenticate by email and password.

        Returns:
            Signed access token

        Raises:
            MissingEmail, MissingPassword, InvalidEmailFormat, InvalidCredentials
        """
        if not email:
            raise MissingEmail()

        if not password:
            raise MissingPassword()

        if not is_valid_email(email):
            raise InvalidEmailFormat()

        account = await run_in_threadpool(self.account_repo.get_by_email, email)

        if account is None:
            # Spend the same bcrypt work as a real check
            await run_in_threadpool(
                lambda: self.credential_store.verify(password, self.credential_store.dummy_hash())
            )
            logger.warning("Sign-in failed")
            raise InvalidCredentials()

        verified = await run_in_threadpool(
            self.credential_store.verify, password, account.password_hash
        )
        if not verified:
            logger.warning("Sign-in failed")
            raise InvalidCredentials()

        logger.info(f"Account {account.account_id} signed in")
        return self.token_service.issue(account.account_id)

    # ============ IDENTITY ============

    async def who_am_i(self, account_id: int) -> Dict[str, Any]:
        """
        Get the caller's account joined with its profile.

        Raises:
            NotFound: If the account no longer exists
        """
        row = await run_in_threadpool(self.account_repo.get_with_profile, account_id)
        if row is None:
            raise NotFound("Account not found.")

        account, profile = row
        return account_view(account, profile)

