from datetime import datetime
from typing import List, Optional

from pydantic import Field

from api.models.auth_schemas import CamelModel


# ============ Request Schemas ============

class ResumeCreateRequest(CamelModel):
    title: Optional[str] = Field(None, description="Resume title")
    content: Optional[str] = Field(None, description="Self introduction, at least 10 characters")


class ResumeUpdateRequest(CamelModel):
    """Omitted fields are left unchanged."""
    title: Optional[str] = None
    content: Optional[str] = None


# ============ Response Schemas ============

class ResumeBase(CamelModel):
    resume_id: int
    account_id: int
    title: str
    content: str
    status: str
    created_at: datetime
    updated_at: datetime


class ResumeDetail(ResumeBase):
    name: str = Field(..., description="Owner's display name")


class ResumeResponse(CamelModel):
    message: str
    resume: ResumeBase


class ResumeDetailResponse(CamelModel):
    message: str
    data: ResumeDetail


class ResumeListResponse(CamelModel):
    message: str
    data: List[ResumeDetail]


class ResumeDeleteResponse(CamelModel):
    message: str
    resume_id: int
