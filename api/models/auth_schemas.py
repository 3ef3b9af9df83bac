from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys (passwordConfirm, accountId, ...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============ Request Schemas ============

class SignUpRequest(CamelModel):
    """Fields are optional here; the service reports which rule failed."""
    email: Optional[str] = Field(None, description="Login email (local@domain)")
    password: Optional[str] = Field(None, description="At least 6 characters")
    password_confirm: Optional[str] = Field(None, description="Must equal password")
    name: Optional[str] = Field(None, description="Display name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@b.com",
                "password": "secret1",
                "passwordConfirm": "secret1",
                "name": "A"
            }
        },
    )


class SignInRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


# ============ Response Schemas ============

class AccountInfo(CamelModel):
    account_id: int
    email: str
    name: str
    role: str
    created_at: datetime
    updated_at: datetime


class SignUpResponse(CamelModel):
    message: str
    account_info: AccountInfo


class SignInResponse(CamelModel):
    message: str
    token: str


class MeResponse(CamelModel):
    message: str
    data: AccountInfo


class ErrorResponse(BaseModel):
    """Body of every failed request"""
    message: str = Field(..., description="Human-readable error message")
