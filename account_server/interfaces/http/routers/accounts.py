"""Account opening and listing endpoints."""
from fastapi import APIRouter, Depends, Query, status

from account_server.interfaces.http.deps import get_account_service
from account_server.modules.accounts import AccountService
from account_server.schemas import AccountInfoResponse, CreateAccountRequest, CreateAccountResponse

router = APIRouter()


@router.post(
    "",
    response_model=CreateAccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a new account for a user",
)
async def create_account(
    payload: CreateAccountRequest,
    account_service: AccountService = Depends(get_account_service),
) -> CreateAccountResponse:
    result = await account_service.create_account(payload.user_id, payload.initial_balance)
    return CreateAccountResponse.model_validate(result)


@router.get("", response_model=list[AccountInfoResponse], summary="List a user's accounts")
async def get_accounts(
    user_id: int = Query(..., ge=1),
    account_service: AccountService = Depends(get_account_service),
) -> list[AccountInfoResponse]:
    accounts = await account_service.get_accounts_by_user_id(user_id)
    return [AccountInfoResponse.model_validate(account) for account in accounts]
