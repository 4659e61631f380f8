"""Precondition checks run before any balance mutation."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..core.errors import (
    AccountMismatchError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    NullArgumentError,
)
from ..models import (
    AMOUNT_DECIMAL_PLACES,
    MAX_AMOUNT,
    AccountSummary,
    AccountTransaction,
    TransactionType,
)


def argument_not_null(name: str, value: Any) -> None:
    if value is None:
        raise NullArgumentError(f"{name} is required")


def validate_amount_precision(amount: Decimal) -> None:
    """Reject amounts the ledger cannot store exactly."""
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {amount}")
    if abs(amount) >= MAX_AMOUNT:
        raise InvalidAmountError(f"Amount {amount} exceeds the maximum of {MAX_AMOUNT}")
    if amount != amount.quantize(Decimal(1).scaleb(-AMOUNT_DECIMAL_PLACES)):
        raise InvalidAmountError(
            f"Amount {amount} has more than {AMOUNT_DECIMAL_PLACES} decimal places"
        )


def validate_account(account_number: int, summary: Optional[AccountSummary]) -> None:
    if summary is None:
        raise AccountNotFoundError(f"Account {account_number} not found")
    if summary.account_number != account_number:
        raise AccountMismatchError(
            f"Account number {account_number} does not match summary "
            f"{summary.account_number}"
        )


def validate_transaction(
    transaction: Optional[AccountTransaction],
    summary: AccountSummary,
    transaction_type: TransactionType,
) -> None:
    """Reject absent transactions, unstorable or non-positive amounts and overdrawing withdrawals.

    Deposits are also refused when the resulting balance would leave the storable range.
    """
    argument_not_null("transaction", transaction)

    amount = transaction.amount
    validate_amount_precision(amount)
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")

    if transaction_type is TransactionType.DEPOSIT and summary.balance.add(amount) >= MAX_AMOUNT:
        raise InvalidAmountError(
            f"Deposit of {amount} would take the balance past {MAX_AMOUNT}"
        )

    if transaction_type is TransactionType.WITHDRAWAL and summary.balance < amount:
        raise InsufficientFundsError(
            f"Insufficient funds for withdrawal: balance {summary.balance}, "
            f"requested {amount}"
        )
