"""
Auth API Routes - Thin Controller Layer.

Endpoints:
- POST /auth/sign-up - Register an account
- POST /auth/sign-in - Exchange email/password for an access token
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from api.auth import get_token_service
from api.models.auth_schemas import (
    AccountInfo,
    ErrorResponse,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    SignUpResponse,
)
from services import AuthenticationService
from utils.database import get_db
from utils.credential_store import CredentialStore
from utils.token_service import TokenService

# One store per process; its dummy hash is computed once
credential_store = CredentialStore()

router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


def get_auth_service(
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
) -> AuthenticationService:
    """Get AuthenticationService instance with injected dependencies."""
    return AuthenticationService(db, token_service, credential_store)


@router.post(
    "/sign-up",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def sign_up(
    request: SignUpRequest,
    service: AuthenticationService = Depends(get_auth_service),
):
    """
    Register a new account.

    New accounts always get the APPLICANT role.
    """
    account = await service.sign_up(
        email=request.email,
        password=request.password,
        password_confirm=request.password_confirm,
        name=request.name,
    )
    return SignUpResponse(message="Sign-up completed.", account_info=AccountInfo(**account))


@router.post(
    "/sign-in",
    response_model=SignInResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
    },
)
async def sign_in(
    request: SignInRequest,
    service: AuthenticationService = Depends(get_auth_service),
):
    """Sign in and receive a bearer token valid for 12 hours."""
    token = await service.sign_in(email=request.email, password=request.password)
    return SignInResponse(message="Signed in.", token=token)
