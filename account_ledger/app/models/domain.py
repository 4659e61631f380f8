from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CAD = "CAD"
    CHF = "CHF"
    AUD = "AUD"


class TransactionType(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


# Stored amounts are whole units of 10**-4; 14 integer digits keep them in a signed 64-bit column.
AMOUNT_DECIMAL_PLACES = 4
AMOUNT_INTEGER_DIGITS = 14
MAX_AMOUNT = Decimal(10) ** AMOUNT_INTEGER_DIGITS


def _to_decimal(value: Union[Decimal, int, str]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def as_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC, reading naive datetimes as UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclass(frozen=True)
class Money:
    """
    Immutable amount tied to a currency.

    Arithmetic and ordering look at amounts only. Mixing currencies is a
    caller precondition and is never checked here; no conversion happens.
    Amounts are not rounded, so ``(m + d) - d == m`` holds exactly.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        object.__setattr__(self, "currency", Currency(self.currency))

    def to_amount(self, amount: Union[Decimal, int, str]) -> Money:
        return Money(_to_decimal(amount), self.currency)

    def add(self, value: Union[Money, Decimal, int]) -> Money:
        if isinstance(value, Money):
            return self.add(value.amount)
        return Money(self.amount + _to_decimal(value), self.currency)

    def subtract(self, value: Union[Money, Decimal, int]) -> Money:
        if isinstance(value, Money):
            return self.subtract(value.amount)
        return Money(self.amount - _to_decimal(value), self.currency)

    def compare(self, value: Union[Money, Decimal, int]) -> int:
        other = value.amount if isinstance(value, Money) else _to_decimal(value)
        if self.amount < other:
            return -1
        if self.amount > other:
            return 1
        return 0

    def __add__(self, value: Union[Money, Decimal, int]) -> Money:
        return self.add(value)

    def __radd__(self, value: Union[Decimal, int]) -> Money:
        return self.add(value)

    def __sub__(self, value: Union[Money, Decimal, int]) -> Money:
        return self.subtract(value)

    def __lt__(self, value: Union[Money, Decimal, int]) -> bool:
        return self.compare(value) < 0

    def __le__(self, value: Union[Money, Decimal, int]) -> bool:
        return self.compare(value) <= 0

    def __gt__(self, value: Union[Money, Decimal, int]) -> bool:
        return self.compare(value) > 0

    def __ge__(self, value: Union[Money, Decimal, int]) -> bool:
        return self.compare(value) >= 0

    def __str__(self) -> str:
        return f"{self.currency.value} {self.amount}"


@dataclass
class AccountSummary:
    account_number: int
    balance: Money

    @property
    def currency(self) -> Currency:
        return self.balance.currency


@dataclass
class AccountTransaction:
    """A requested deposit or withdrawal; the service fills in type and snapshot."""

    account_number: int
    amount: Decimal
    description: Optional[str] = None
    date: datetime = field(default_factory=lambda: datetime.now(UTC))
    transaction_type: Optional[TransactionType] = None
    # balance before this transaction was applied
    current_balance: Optional[Money] = None

    def __post_init__(self) -> None:
        self.amount = _to_decimal(self.amount)
        self.date = as_utc(self.date)


@dataclass(frozen=True)
class StatementDate:
    start_date: datetime
    end_date: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", as_utc(self.start_date))
        object.__setattr__(self, "end_date", as_utc(self.end_date))
        if self.start_date > self.end_date:
            raise ValueError("Statement start date must not be after end date")


@dataclass(frozen=True)
class StatementTransaction:
    transaction_type: TransactionType
    date: datetime
    description: Optional[str]
    amount: Money
    current_balance: Money


@dataclass(frozen=True)
class AccountStatement:
    account_number: int
    currency: Currency
    date: StatementDate
    transaction_details: list[StatementTransaction] = field(default_factory=list)


@dataclass
class TransactionResult:
    account_number: int
    balance: Money
    amount: Optional[Decimal] = None
    transaction_type: Optional[TransactionType] = None
    current_balance: Optional[Money] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
