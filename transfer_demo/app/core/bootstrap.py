from __future__ import annotations

import logging
from decimal import Decimal

from sqlmodel import Session, select

from ..models import AccountModel
from ..services import AccountRepository
from .db import unit_of_work


logger = logging.getLogger(__name__)

DEMO_ACCOUNTS: tuple[tuple[str, Decimal], ...] = (
    ("acc1", Decimal("1000.01")),
    ("acc2", Decimal("2000.01")),
)


def seed_accounts(session: Session) -> list[AccountModel]:
    """Insert the demo accounts when the account table is empty."""
    if session.exec(select(AccountModel)).first() is not None:
        return []

    repository = AccountRepository(session)
    with unit_of_work(session):
        seeded = [
            repository.save(AccountModel(name=name, balance=balance))
            for name, balance in DEMO_ACCOUNTS
        ]
        ids = [account.id for account in seeded]
    logger.info("accounts.seeded", extra={"account_ids": ids})
    return seeded
