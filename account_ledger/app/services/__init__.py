from .mapper import LedgerMapper
from .repository import (
    SummaryRepository,
    SummaryStore,
    TransactionRepository,
    TransactionStore,
)
from .transaction import TransactionService

__all__ = [
    "LedgerMapper",
    "SummaryRepository",
    "SummaryStore",
    "TransactionRepository",
    "TransactionStore",
    "TransactionService",
]
