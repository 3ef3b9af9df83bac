"""
Resume API Routes - Thin Controller Layer.

All endpoints require a bearer token and only ever touch the caller's own
resumes.

Endpoints:
- POST /resumes - Create resume
- GET /resumes - List own resumes (?sort=asc|desc, default desc)
- GET /resumes/{resume_id} - Get resume
- PATCH /resumes/{resume_id} - Update title and/or content
- DELETE /resumes/{resume_id} - Delete resume
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from api.auth import CallerContext, get_current_account
from api.models.auth_schemas import ErrorResponse
from api.models.resume_schemas import (
    ResumeBase,
    ResumeCreateRequest,
    ResumeDeleteResponse,
    ResumeDetail,
    ResumeDetailResponse,
    ResumeListResponse,
    ResumeResponse,
    ResumeUpdateRequest,
)
from services import ResumeService
from utils.database import get_db

router = APIRouter(
    prefix="/resumes",
    tags=["Resumes"],
    dependencies=[Depends(get_current_account)],
    responses={401: {"model": ErrorResponse, "description": "Missing or invalid token"}},
)


def get_resume_service(db: Session = Depends(get_db)) -> ResumeService:
    """Get ResumeService instance with injected dependencies."""
    return ResumeService(db)


@router.post(
    "",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_resume(
    request: ResumeCreateRequest,
    caller: CallerContext = Depends(get_current_account),
    service: ResumeService = Depends(get_resume_service),
):
    """Create a resume. New resumes start in APPLY status."""
    resume = await service.create(caller.account_id, request.title, request.content)
    return ResumeResponse(message="Resume created.", resume=ResumeBase(**resume))


@router.get("", response_model=ResumeListResponse)
async def list_resumes(
    sort: Optional[str] = Query(None, description="asc for oldest first; anything else is newest first"),
    caller: CallerContext = Depends(get_current_account),
    service: ResumeService = Depends(get_resume_service),
):
    """List the caller's resumes."""
    resumes = await service.list(caller.account_id, sort)
    return ResumeListResponse(
        message="Resumes retrieved.",
        data=[ResumeDetail(**resume) for resume in resumes],
    )


@router.get(
    "/{resume_id}",
    response_model=ResumeDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_resume(
    resume_id: int,
    caller: CallerContext = Depends(get_current_account),
    service: ResumeService = Depends(get_resume_service),
):
    """Get one of the caller's resumes."""
    resume = await service.get_by_id(caller.account_id, resume_id)
    return ResumeDetailResponse(message="Resume retrieved.", data=ResumeDetail(**resume))


@router.patch(
    "/{resume_id}",
    response_model=ResumeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_resume(
    resume_id: int,
    request: ResumeUpdateRequest,
    caller: CallerContext = Depends(get_current_account),
    service: ResumeService = Depends(get_resume_service),
):
    """Update title and/or content of one of the caller's resumes."""
    resume = await service.update(
        caller.account_id,
        resume_id,
        title=request.title,
        content=request.content,
    )
    return ResumeResponse(message="Resume updated.", resume=ResumeBase(**resume))


@router.delete(
    "/{resume_id}",
    response_model=ResumeDeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_resume(
    resume_id: int,
    caller: CallerContext = Depends(get_current_account),
    service: ResumeService = Depends(get_resume_service),
):
    """Delete one of the caller's resumes."""
    deleted_id = await service.delete(caller.account_id, resume_id)
    return ResumeDeleteResponse(message="Resume deleted.", resume_id=deleted_id)
