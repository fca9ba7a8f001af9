from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlmodel import Session, SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata
from .config import get_settings


logger = logging.getLogger(__name__)


def create_engine_for_url(database_url: str, echo: bool = False):
    connect_args: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(database_url, echo=echo, connect_args=connect_args)


settings = get_settings()
engine = create_engine_for_url(settings.database_url, echo=settings.sql_echo)


def init_db() -> None:
    SQLModel.metadata.create_all(engine)


def get_engine():
    return engine


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def set_engine(new_engine) -> None:
    global engine
    engine = new_engine


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """Run the enclosed statements as one database transaction.

    Begins a transaction when the session has none. If the session already
    autobegan one (an earlier query), the block adopts it: that earlier work
    commits or rolls back together with the block.

    Commits when the block exits normally. Any exception rolls back and is
    re-raised unchanged.
    """
    transaction = session.get_transaction() or session.begin()
    try:
        yield session
        transaction.commit()
    except Exception:
        transaction.rollback()
        logger.debug("unit_of_work.rolled_back", exc_info=True)
        raise
