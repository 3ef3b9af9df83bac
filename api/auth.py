import logging
from typing import Optional

from pydantic import BaseModel
from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from repositories.account_repository import AccountRepository
from services.exceptions import Unauthenticated
from utils.database import get_db
from utils.token_service import InvalidToken, TokenService

logger = logging.getLogger(__name__)

# Define bearer security scheme for OpenAPI/Swagger
bearer_scheme = HTTPBearer(auto_error=False)


class CallerContext(BaseModel):
    """Identity resolved from a verified access token."""
    account_id: int
    role: Optional[str] = None


def get_token_service(request: Request) -> TokenService:
    """TokenService built once at startup (see api.main lifespan)."""
    return request.app.state.token_service


async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    token_service: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db),
) -> CallerContext:
    """
    Dependency to resolve the caller from an `Authorization: Bearer` header.

    Re-checks account existence on every call, so tokens of a deleted account
    stop working immediately.

    Returns:
        CallerContext: Account id and role for use in routes

    Raises:
        Unauthenticated: Missing token, invalid/expired token, or unknown account.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    try:
        account_id = token_service.verify(credentials.credentials)
    except InvalidToken as e:
        logger.warning(f"Rejected access token: {e}")
        raise Unauthenticated()

    row = await run_in_threadpool(AccountRepository(db).get_with_profile, account_id)
    if row is None:
        logger.warning(f"Access token for unknown account {account_id}")
        raise Unauthenticated()

    account, profile = row
    return CallerContext(account_id=account.account_id, role=profile.role)
