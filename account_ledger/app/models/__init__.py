from .db import AccountSummary as AccountSummaryModel
from .db import AccountTransaction as AccountTransactionModel
from .domain import (
    AMOUNT_DECIMAL_PLACES,
    AMOUNT_INTEGER_DIGITS,
    MAX_AMOUNT,
    AccountStatement,
    AccountSummary,
    AccountTransaction,
    Currency,
    Money,
    StatementDate,
    StatementTransaction,
    TransactionResult,
    TransactionType,
    as_utc,
)
from .schemas import (
    AccountOpenRequest,
    MoneyMovementRequest,
    MoneySchema,
    StatementResponse,
    StatementTransactionResponse,
    TransactionResponse,
)

__all__ = [
    "AMOUNT_DECIMAL_PLACES",
    "AMOUNT_INTEGER_DIGITS",
    "MAX_AMOUNT",
    "as_utc",
    "AccountStatement",
    "AccountSummary",
    "AccountTransaction",
    "Currency",
    "Money",
    "StatementDate",
    "StatementTransaction",
    "TransactionResult",
    "TransactionType",
    "AccountOpenRequest",
    "MoneyMovementRequest",
    "MoneySchema",
    "StatementResponse",
    "StatementTransactionResponse",
    "TransactionResponse",
    "AccountSummaryModel",
    "AccountTransactionModel",
]
