from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel


class Account(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    balance: Decimal = Field(default=Decimal("0"), max_digits=15, decimal_places=2)
