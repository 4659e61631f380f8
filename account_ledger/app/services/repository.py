from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import StoreFailureError
from ..models import AccountSummaryModel, AccountTransactionModel


logger = logging.getLogger(__name__)


class SummaryStore(Protocol):
    def read(self, account_number: int) -> Optional[AccountSummaryModel]: ...

    def add(self, summary: AccountSummaryModel) -> AccountSummaryModel: ...


class TransactionStore(Protocol):
    def create(
        self,
        transaction: AccountTransactionModel,
        summary: AccountSummaryModel,
    ) -> None: ...

    def get(
        self,
        account_number: int,
        start_date: datetime,
        end_date: datetime,
    ) -> list[AccountTransactionModel]: ...


class SummaryRepository:
    """Reads and creates account summaries through a SQLModel session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def read(self, account_number: int) -> Optional[AccountSummaryModel]:
        try:
            return self.session.get(AccountSummaryModel, account_number)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreFailureError(f"Could not read account {account_number}") from exc

    def add(self, summary: AccountSummaryModel) -> AccountSummaryModel:
        try:
            self.session.add(summary)
            self.session.commit()
            self.session.refresh(summary)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreFailureError(
                f"Could not create account {summary.account_number}"
            ) from exc
        return summary


class TransactionRepository:
    """Ledger entries plus the paired entry-and-summary write."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        transaction: AccountTransactionModel,
        summary: AccountSummaryModel,
    ) -> None:
        # one commit covers both rows so they land together or not at all
        try:
            self.session.add(transaction)
            self.session.merge(summary)
            self.session.commit()
            self.session.refresh(transaction)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(
                "store.paired_write.failed",
                extra={"account_number": transaction.account_number},
            )
            raise StoreFailureError(
                f"Could not record transaction for account {transaction.account_number}"
            ) from exc

    def get(
        self,
        account_number: int,
        start_date: datetime,
        end_date: datetime,
    ) -> list[AccountTransactionModel]:
        stmt = (
            select(AccountTransactionModel)
            .where(AccountTransactionModel.account_number == account_number)
            .where(AccountTransactionModel.date >= start_date)
            .where(AccountTransactionModel.date <= end_date)
            .order_by(AccountTransactionModel.date.asc(), AccountTransactionModel.id.asc())
        )
        try:
            return list(self.session.exec(stmt))
        except SQLAlchemyError as exc:
            raise StoreFailureError(
                f"Could not load transactions for account {account_number}"
            ) from exc
