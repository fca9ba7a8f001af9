"""Request-scoped providers.

FastAPI resolves ``get_session`` once per request, so the repository and
the service built here always share the request's session.
"""

from fastapi import Depends
from sqlmodel import Session

from ..services import AccountRepository, TransferService
from .db import get_session


def get_account_repository(session: Session = Depends(get_session)) -> AccountRepository:
    return AccountRepository(session)


def get_transfer_service(
    session: Session = Depends(get_session),
    repository: AccountRepository = Depends(get_account_repository),
) -> TransferService:
    return TransferService(session, repository)
