"""Seed script to insert a demo account (with a resume) for local development.

Usage:
  python scripts/seed_account.py
  python scripts/seed_account.py --email me@example.com --password secret1
  python scripts/seed_account.py --reset
"""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import argparse
from sqlmodel import Session
from sqlalchemy import delete

from models.account import Account, AccountProfile
from models.resume import Resume, ResumeStatus
from repositories import AccountRepository, ResumeRepository
from utils.clock import utc_now
from utils.credential_store import CredentialStore
from utils.database import create_db_and_tables, get_engine

DEFAULT_EMAIL = "demo@example.com"
DEFAULT_PASSWORD = "secret1"
DEFAULT_NAME = "Demo Applicant"


def seed_account(email: str, password: str, name: str, reset: bool = False) -> bool:
    engine = get_engine()
    create_db_and_tables(engine)

    with Session(engine) as db:
        repo = AccountRepository(db)
        existing = repo.get_by_email(email)

        if existing and reset:
            print(f"Removing existing account '{email}'...")
            db.exec(delete(Resume).where(Resume.account_id == existing.account_id))
            db.exec(delete(AccountProfile).where(AccountProfile.account_id == existing.account_id))
            db.exec(delete(Account).where(Account.account_id == existing.account_id))
            db.commit()
            existing = None

        if existing:
            print(f"✅ Account '{email}' already exists (id={existing.account_id})")
            return True

        account = Account(
            email=email,
            password_hash=CredentialStore().hash(password),
            name=name,
        )
        account, profile = repo.create_with_profile(account)
        print(f"✅ Created account '{email}' (id={account.account_id}, role={profile.role})")

        now = utc_now()
        resume = ResumeRepository(db).create(Resume(
            account_id=account.account_id,
            title="Backend Engineer",
            content="Five years building Python APIs with FastAPI and PostgreSQL.",
            status=ResumeStatus.APPLY.value,
            created_at=now,
            updated_at=now,
        ))
        print(f"✅ Created resume {resume.resume_id} for '{email}'")

    return True


def main():
    parser = argparse.ArgumentParser(description="Seed a demo account")
    parser.add_argument("--email", default=DEFAULT_EMAIL)
    parser.add_argument("--password", default=DEFAULT_PASSWORD)
    parser.add_argument("--name", default=DEFAULT_NAME)
    parser.add_argument("--reset", action="store_true", help="Delete and recreate the account")
    args = parser.parse_args()

    ok = seed_account(args.email, args.password, args.name, reset=args.reset)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
