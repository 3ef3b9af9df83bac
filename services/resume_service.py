"""
Resume Service - Business Logic Layer.

Owns the resume lifecycle for the authenticated caller:
- Input validation (title/content rules)
- Creation with the initial APPLY status
- Listing with sort order
- Ownership-constrained get/update/delete

Resumes owned by another account are reported as NotFound, the same as
resumes that don't exist.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from models.resume import Resume, ResumeStatus
from repositories import ResumeRepository
from services.exceptions import (
    ContentTooShort,
    MissingContent,
    MissingTitle,
    NotFound,
    NothingToUpdate,
)
from utils.clock import utc_now

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 10
SORT_ASC = "asc"
# Primary keys are 32-bit INTEGER columns
MAX_RESUME_ID = 2**31 - 1


def resume_view(resume: Resume) -> Dict[str, Any]:
    """Full record view."""
    return {
        "resume_id": resume.resume_id,
        "account_id": resume.account_id,
        "title": resume.title,
        "content": resume.content,
        "status": resume.status,
        "created_at": resume.created_at,
        "updated_at": resume.updated_at,
    }


def resume_detail(resume: Resume, owner_name: str) -> Dict[str, Any]:
    """Record view with the owner's display name."""
    view = resume_view(resume)
    view["name"] = owner_name
    return view


def is_storable_id(resume_id: int) -> bool:
    """Ids outside the column range can never match a row."""
    return 1 <= resume_id <= MAX_RESUME_ID


def is_ascending(sort_order: Optional[str]) -> bool:
    """Only "asc" (any case) sorts ascending; everything else is descending."""
    return bool(sort_order) and sort_order.strip().lower() == SORT_ASC


class ResumeService:
    """Application service for resume operations scoped to one account."""

    def __init__(self, db_session: Session):
        self.db = db_session
        self.resume_repo = ResumeRepository(db_session)

    # ============ CREATE ============

    async def create(
        self,
        account_id: int,
        title: Optional[str],
        content: Optional[str],
    ) -> Dict[str, Any]:
        """
        Create a resume in APPLY status.

        Raises:
            MissingTitle, MissingContent, ContentTooShort
        """
        if not title:
            raise MissingTitle()

        if not content:
            raise MissingContent()

        if len(content) < MIN_CONTENT_LENGTH:
            raise ContentTooShort()

        now = utc_now()
        resume = Resume(
            account_id=account_id,
            title=title,
            content=content,
            status=ResumeStatus.APPLY.value,
            created_at=now,
            updated_at=now,
        )
        resume = await run_in_threadpool(self.resume_repo.create, resume)

        logger.info(f"Resume {resume.resume_id} created by account {account_id}")
        return resume_view(resume)

    # ============ READ ============

    async def list(self, account_id: int, sort_order: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List the caller's resumes, newest first unless sort_order is "asc".

        Returns:
            List of resume details (empty if none)
        """
        rows = await run_in_threadpool(
            self.resume_repo.list_by_account, account_id, is_ascending(sort_order)
        )
        return [resume_detail(resume, name) for resume, name in rows]

    async def get_by_id(self, account_id: int, resume_id: int) -> Dict[str, Any]:
        """
        Get one of the caller's resumes.

        Raises:
            NotFound: If the resume doesn't exist or isn't owned by the caller
        """
        if not is_storable_id(resume_id):
            raise NotFound("Resume not found.")

        row = await run_in_threadpool(
            self.resume_repo.get_owned_with_owner_name, resume_id, account_id
        )
        if row is None:
            raise NotFound("Resume not found.")

        resume, name = row
        return resume_detail(resume, name)

    # ============ UPDATE / DELETE ============

    async def update(
        self,
        account_id: int,
        resume_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Partially update title and/or content.

        Raises:
            NothingToUpdate, MissingTitle, ContentTooShort, NotFound
        """
        if title is None and content is None:
            raise NothingToUpdate()

        if title is not None and not title:
            raise MissingTitle()

        if content is not None and len(content) < MIN_CONTENT_LENGTH:
            raise ContentTooShort()

        if not is_storable_id(resume_id):
            raise NotFound("Resume not found.")

        resume = await run_in_threadpool(self.resume_repo.get_owned, resume_id, account_id)
        if resume is None:
            raise NotFound("Resume not found.")

        if title is not None:
            resume.title = title
        if content is not None:
            resume.content = content
        resume.updated_at = utc_now()

        resume = await run_in_threadpool(self.resume_repo.update, resume)

        logger.info(f"Resume {resume_id} updated by account {account_id}")
        return resume_view(resume)

    async def delete(self, account_id: int, resume_id: int) -> int:
        """
        Delete one of the caller's resumes.

        Returns:
            The deleted resume id

        Raises:
            NotFound: If the resume doesn't exist or isn't owned by the caller
        """
        if not is_storable_id(resume_id):
            raise NotFound("Resume not found.")

        resume = await run_in_threadpool(self.resume_repo.get_owned, resume_id, account_id)
        if resume is None:
            raise NotFound("Resume not found.")

        await run_in_threadpool(self.resume_repo.delete, resume)

        logger.info(f"Resume {resume_id} deleted by account {account_id}")
        return resume_id
