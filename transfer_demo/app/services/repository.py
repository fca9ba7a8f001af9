from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Optional

from sqlalchemy import update
from sqlmodel import Session, select

from ..models import AccountModel


class AccountRepository:
    """Thin data access layer around the SQLModel session.

    Balance changes are issued as single ``UPDATE`` statements evaluated by
    the database, never as read-modify-write on a loaded instance.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, account_id: int) -> Optional[AccountModel]:
        return self.session.get(AccountModel, account_id)

    def lock(self, account_ids: Iterable[int]) -> list[AccountModel]:
        """Load rows with ``SELECT ... FOR UPDATE`` in ascending id order."""
        stmt = (
            select(AccountModel)
            .where(AccountModel.id.in_(sorted(set(account_ids))))
            .order_by(AccountModel.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return list(self.session.exec(stmt))

    def save(self, account: AccountModel) -> AccountModel:
        self.session.add(account)
        self.session.flush()
        self.session.refresh(account)
        return account

    # Balance mutations ---------------------------------------------------
    def increment_balance(self, account_id: int, amount: Decimal) -> int:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(balance=AccountModel.balance + amount)
            .execution_options(synchronize_session=False)
        )
        return self.session.exec(stmt).rowcount

    def decrement_balance(self, account_id: int, amount: Decimal) -> int:
        """Debit ``amount`` only while the stored balance still covers it.

        Returns 0 when the row is missing or the balance is too low, so the
        check and the debit are one statement even where ``lock()`` is a no-op.
        """
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .where(AccountModel.balance >= amount)
            .values(balance=AccountModel.balance - amount)
            .execution_options(synchronize_session=False)
        )
        return self.session.exec(stmt).rowcount
