from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AccountCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Display label of the account")
    balance: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        max_digits=15,
        decimal_places=2,
        description="Opening balance",
    )


class AccountResponse(BaseModel):
    id: int
    name: str
    balance: Decimal


class TransferRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_account_id: int = Field(..., alias="fromAccountId")
    to_account_id: int = Field(..., alias="toAccountId")
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
