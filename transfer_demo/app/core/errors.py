class AccountNotFoundError(Exception):
    """Raised when an account id does not resolve to a stored record."""


class InsufficientFundsError(Exception):
    """Raised when a transfer would drop the source balance below zero."""


class InvalidTransferError(ValueError):
    """Raised for transfers that can never succeed (bad amount, same account)."""
