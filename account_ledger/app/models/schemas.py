from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .domain import AMOUNT_DECIMAL_PLACES, AMOUNT_INTEGER_DIGITS, Currency, TransactionType

_AMOUNT_DIGITS = AMOUNT_INTEGER_DIGITS + AMOUNT_DECIMAL_PLACES

class MoneySchema(BaseModel):
    amount: Decimal
    currency: Currency

class AccountOpenRequest(BaseModel):
    account_number: int = Field(..., ge=1)
    currency: Optional[Currency] = Field(
        default=None, description="Defaults to the configured ledger currency"
    )
    opening_balance: Decimal = Field(
        default=Decimal("0"),
        max_digits=_AMOUNT_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Genesis balance",
    )

class MoneyMovementRequest(BaseModel):
    # positivity is enforced by the transaction core, not here
    amount: Decimal = Field(
        ..., max_digits=_AMOUNT_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES
    )
    description: Optional[str] = Field(default=None, description="Narrative to display on the statement")

class TransactionResponse(BaseModel):
    account_number: int
    balance: MoneySchema
    amount: Optional[Decimal] = None
    transaction_type: Optional[TransactionType] = None
    current_balance: Optional[MoneySchema] = None
    date: Optional[datetime] = None
    description: Optional[str] = None

class StatementTransactionResponse(BaseModel):
    transaction_type: TransactionType
    date: datetime
    description: Optional[str] = None
    amount: MoneySchema
    current_balance: MoneySchema

class StatementResponse(BaseModel):
    account_number: int
    currency: Currency
    start_date: datetime
    end_date: datetime
    transaction_details: list[StatementTransactionResponse]
