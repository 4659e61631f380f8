from decimal import Decimal

import pytest

from ..core.errors import (
    AccountMismatchError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    NullArgumentError,
)
from ..models import AccountSummary, AccountTransaction, Currency, Money, TransactionType
from ..services.validation import (
    argument_not_null,
    validate_account,
    validate_amount_precision,
    validate_transaction,
)


@pytest.fixture
def summary() -> AccountSummary:
    return AccountSummary(account_number=1001, balance=Money(Decimal("150"), Currency.USD))


def test_argument_not_null() -> None:
    argument_not_null("transaction", object())
    with pytest.raises(NullArgumentError, match="transaction"):
        argument_not_null("transaction", None)


def test_validate_account_missing_summary() -> None:
    with pytest.raises(AccountNotFoundError):
        validate_account(9999, None)


def test_validate_account_mismatch(summary: AccountSummary) -> None:
    with pytest.raises(AccountMismatchError):
        validate_account(1002, summary)


def test_validate_account_ok(summary: AccountSummary) -> None:
    validate_account(1001, summary)


def test_validate_transaction_rejects_missing_transaction(summary: AccountSummary) -> None:
    with pytest.raises(NullArgumentError):
        validate_transaction(None, summary, TransactionType.DEPOSIT)


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-0.01"), Decimal("-100")])
@pytest.mark.parametrize("transaction_type", list(TransactionType))
def test_validate_transaction_rejects_non_positive_amount(
    summary: AccountSummary, amount: Decimal, transaction_type: TransactionType
) -> None:
    transaction = AccountTransaction(account_number=1001, amount=amount)
    with pytest.raises(InvalidAmountError):
        validate_transaction(transaction, summary, transaction_type)


def test_withdrawal_requires_sufficient_funds(summary: AccountSummary) -> None:
    transaction = AccountTransaction(account_number=1001, amount=Decimal("200"))
    with pytest.raises(InsufficientFundsError):
        validate_transaction(transaction, summary, TransactionType.WITHDRAWAL)


def test_withdrawal_of_entire_balance_is_allowed(summary: AccountSummary) -> None:
    transaction = AccountTransaction(account_number=1001, amount=Decimal("150"))
    validate_transaction(transaction, summary, TransactionType.WITHDRAWAL)


def test_deposit_skips_funds_check(summary: AccountSummary) -> None:
    transaction = AccountTransaction(account_number=1001, amount=Decimal("10000"))
    validate_transaction(transaction, summary, TransactionType.DEPOSIT)


@pytest.mark.parametrize(
    "amount",
    [Decimal("0.00001"), Decimal("1.23456"), Decimal("100000000000000"), Decimal("NaN"), Decimal("Infinity")],
)
def test_validate_amount_precision_rejects_unstorable_amounts(amount: Decimal) -> None:
    with pytest.raises(InvalidAmountError):
        validate_amount_precision(amount)


@pytest.mark.parametrize(
    "amount",
    [Decimal("0.0001"), Decimal("1.2300000"), Decimal("99999999999999.9999"), Decimal("1E+3")],
)
def test_validate_amount_precision_accepts_storable_amounts(amount: Decimal) -> None:
    validate_amount_precision(amount)


def test_deposit_that_overflows_balance_is_rejected() -> None:
    summary = AccountSummary(
        account_number=1001, balance=Money(Decimal("99999999999999"), Currency.USD)
    )
    transaction = AccountTransaction(account_number=1001, amount=Decimal("1"))
    with pytest.raises(InvalidAmountError):
        validate_transaction(transaction, summary, TransactionType.DEPOSIT)
