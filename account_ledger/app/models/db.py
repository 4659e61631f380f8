from __future__ import annotations
from datetime import datetime, UTC
from typing import Optional
from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel

# Money columns hold integer units of 10**-AMOUNT_DECIMAL_PLACES (see models.domain)

class AccountSummary(SQLModel, table=True):
    __tablename__ = "account_summary"

    account_number: int = Field(primary_key=True)
    balance: int = Field(default=0, sa_type=BigInteger)
    currency: str = Field(max_length=3)

class AccountTransaction(SQLModel, table=True):
    __tablename__ = "account_transaction"

    id: Optional[int] = Field(default=None, primary_key=True)
    account_number: int = Field(index=True)
    amount: int = Field(sa_type=BigInteger)
    transaction_type: str
    current_balance: int = Field(sa_type=BigInteger)
    date: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    description: Optional[str] = None
