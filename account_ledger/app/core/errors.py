class LedgerError(Exception):
    """Base class for errors raised by the transaction core."""


class NullArgumentError(LedgerError):
    """Raised when a required argument is missing."""


class AccountNotFoundError(LedgerError):
    """Raised when an account number has no summary in the store."""


class AccountMismatchError(LedgerError):
    """Raised when a loaded summary belongs to a different account number."""


class AccountExistsError(LedgerError):
    """Raised when opening an account whose number is already taken."""


class InvalidAmountError(LedgerError):
    """Raised when a transaction amount is zero or negative."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal would drop balance below zero."""


class StoreFailureError(LedgerError):
    """Raised when the store cannot complete a read or the paired write."""
