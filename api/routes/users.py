from fastapi import APIRouter, Depends

from api.auth import CallerContext, get_current_account
from api.models.auth_schemas import AccountInfo, ErrorResponse, MeResponse
from api.routes.auth import get_auth_service
from services import AuthenticationService

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.get(
    "/me",
    response_model=MeResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def who_am_i(
    caller: CallerContext = Depends(get_current_account),
    service: AuthenticationService = Depends(get_auth_service),
):
    """Get the signed-in account with its role and profile timestamps."""
    account = await service.who_am_i(caller.account_id)
    return MeResponse(message="Account retrieved.", data=AccountInfo(**account))
