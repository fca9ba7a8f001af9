from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_transfer_service
from ..models import AccountCreate, AccountResponse, TransferRequest
from ..services import TransferService


router = APIRouter(prefix="/api/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: TransferService = Depends(get_transfer_service),
) -> AccountResponse:
    return service.create_account(payload)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: TransferService = Depends(get_transfer_service),
) -> AccountResponse:
    return service.get_account(account_id)

transfer_router = APIRouter(prefix="/api/transfers", tags=["transfers"])

@transfer_router.post("/transfer", response_model=str)
def transfer(
    payload: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> str:
    service.transfer(payload.from_account_id, payload.to_account_id, payload.amount)
    return "Transfer successful"

__all__ = ["router", "transfer_router"]
