from decimal import Decimal

import pytest
from sqlmodel import Session, SQLModel

from ..core.db import create_engine_for_url
from ..models import AccountModel


@pytest.fixture
def engine(tmp_path):
    engine = create_engine_for_url(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def make_account(engine):
    def _make_account(name: str, balance: str) -> int:
        with Session(engine) as session:
            account = AccountModel(name=name, balance=Decimal(balance))
            session.add(account)
            session.commit()
            session.refresh(account)
            return account.id

    return _make_account


@pytest.fixture
def balance_of(engine):
    def _balance_of(account_id: int) -> Decimal:
        with Session(engine) as session:
            return session.get(AccountModel, account_id).balance

    return _balance_of
