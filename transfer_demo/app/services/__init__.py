from .repository import AccountRepository
from .transfer import TransferService

__all__ = ["AccountRepository", "TransferService"]
