from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlmodel import Session

from ..core.db import unit_of_work
from ..core.errors import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidTransferError,
)
from ..models import AccountCreate, AccountModel, AccountResponse
from .repository import AccountRepository


logger = logging.getLogger(__name__)


class TransferService:
    def __init__(
        self,
        session: Session,
        repository: Optional[AccountRepository] = None,
    ) -> None:
        self.session = session
        self.repository = repository or AccountRepository(session)

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _get_account(self, account_id: int) -> AccountModel:
        account = self.repository.get(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    def _account_to_response(self, account: AccountModel) -> AccountResponse:
        return AccountResponse(
            id=account.id,
            name=account.name,
            balance=account.balance,
        )

    def _validate(self, from_account_id: int, to_account_id: int, amount: Decimal) -> None:
        if amount <= 0:
            raise InvalidTransferError("Transfer amount must be positive")
        if from_account_id == to_account_id:
            raise InvalidTransferError("Cannot transfer to the same account")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, payload: AccountCreate) -> AccountResponse:
        with unit_of_work(self.session):
            account = self.repository.save(
                AccountModel(name=payload.name, balance=payload.balance)
            )
            response = self._account_to_response(account)
        logger.info(
            "account.created",
            extra={"account_id": response.id, "account_name": response.name},
        )
        return response

    def get_account(self, account_id: int) -> AccountResponse:
        with unit_of_work(self.session):
            account = self._get_account(account_id)
            return self._account_to_response(account)

    def transfer(self, from_account_id: int, to_account_id: int, amount: Decimal) -> None:
        """Move ``amount`` from one account to another as a single transaction.

        Raises ``AccountNotFoundError`` when either account is unknown and
        ``InsufficientFundsError`` when the source cannot cover the amount.
        On any error nothing is written.
        """
        try:
            self._validate(from_account_id, to_account_id, amount)
            with unit_of_work(self.session):
                self.repository.lock((from_account_id, to_account_id))
                source = self._get_account(from_account_id)

                if source.balance < amount:
                    raise InsufficientFundsError(
                        "Not enough funds in the source account"
                    )

                # A concurrent debit may have landed since the read above.
                if self.repository.decrement_balance(from_account_id, amount) == 0:
                    raise InsufficientFundsError(
                        "Not enough funds in the source account"
                    )
                if self.repository.increment_balance(to_account_id, amount) == 0:
                    raise AccountNotFoundError(f"Account {to_account_id} not found")
        except (AccountNotFoundError, InsufficientFundsError, InvalidTransferError) as exc:
            logger.warning(
                "transfer.rejected",
                extra={
                    "from_account_id": from_account_id,
                    "to_account_id": to_account_id,
                    "amount": str(amount),
                    "reason": str(exc),
                },
            )
            raise
        except Exception:
            logger.warning(
                "transfer.rolled_back",
                extra={
                    "from_account_id": from_account_id,
                    "to_account_id": to_account_id,
                    "amount": str(amount),
                },
                exc_info=True,
            )
            raise

        logger.info(
            "transfer.completed",
            extra={
                "from_account_id": from_account_id,
                "to_account_id": to_account_id,
                "amount": str(amount),
            },
        )
