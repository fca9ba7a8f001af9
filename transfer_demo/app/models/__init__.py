from .db import Account as AccountModel
from .schemas import AccountCreate, AccountResponse, TransferRequest

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "TransferRequest",
    "AccountModel",
]
