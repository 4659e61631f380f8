from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..core.errors import AccountExistsError, InvalidAmountError, StoreFailureError
from ..models import (
    AccountStatement,
    AccountSummary,
    AccountTransaction,
    Currency,
    Money,
    StatementDate,
    TransactionResult,
    TransactionType,
)
from .mapper import LedgerMapper
from .repository import SummaryStore, TransactionStore
from .validation import (
    argument_not_null,
    validate_account,
    validate_amount_precision,
    validate_transaction,
)


class TransactionService:
    """
    Balance, deposit, withdraw and statement operations for one account at a time.

    Every operation re-reads the account summary and validates before any
    balance is computed. Deposits and withdrawals end in a single paired
    write (ledger entry plus updated summary) handed to the transaction
    store, which is responsible for applying both atomically. Store errors
    propagate unchanged and are never retried.
    """

    def __init__(
        self,
        summary_repository: SummaryStore,
        transaction_repository: TransactionStore,
        mapper: LedgerMapper,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        argument_not_null("summary_repository", summary_repository)
        argument_not_null("transaction_repository", transaction_repository)
        argument_not_null("mapper", mapper)
        self.summary_repository = summary_repository
        self.transaction_repository = transaction_repository
        self.mapper = mapper
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _get_account_summary(self, account_number: int) -> Optional[AccountSummary]:
        entity = self.summary_repository.read(account_number)
        return self.mapper.to_summary(entity)

    def _load_validated_summary(self, account_number: int) -> AccountSummary:
        summary = self._get_account_summary(account_number)
        validate_account(account_number, summary)
        return summary

    def _apply(
        self,
        transaction: Optional[AccountTransaction],
        transaction_type: TransactionType,
    ) -> TransactionResult:
        argument_not_null("transaction", transaction)

        account_number = transaction.account_number
        summary = self._load_validated_summary(account_number)
        validate_transaction(transaction, summary, transaction_type)

        balance = summary.balance
        amount = transaction.amount

        transaction.transaction_type = transaction_type
        transaction.current_balance = balance
        if transaction_type is TransactionType.DEPOSIT:
            summary.balance = balance.add(amount)
        else:
            summary.balance = balance.subtract(amount)

        return self._create_transaction_and_update_summary(transaction, summary)

    def _create_transaction_and_update_summary(
        self,
        transaction: AccountTransaction,
        summary: AccountSummary,
    ) -> TransactionResult:
        transaction_entity = self.mapper.to_transaction_entity(transaction)
        summary_entity = self.mapper.to_summary_entity(summary)

        self.transaction_repository.create(transaction_entity, summary_entity)
        current_summary = self._get_account_summary(transaction.account_number)
        if current_summary is None:
            raise StoreFailureError(
                f"Account {transaction.account_number} vanished after write"
            )

        return self.mapper.to_transaction_result(
            transaction_entity, current_summary.balance
        )

    def _log_transaction(self, event: str, transaction: Optional[AccountTransaction]) -> None:
        if transaction is None:
            self.logger.info(event, extra={"account_number": None})
            return
        self.logger.info(
            event,
            extra={
                "account_number": transaction.account_number,
                "amount": str(transaction.amount),
                "description": transaction.description,
            },
        )

    def _log_result(self, event: str, result: TransactionResult) -> None:
        self.logger.info(
            event,
            extra={
                "account_number": result.account_number,
                "amount": str(result.amount),
                "previous_balance": str(result.current_balance),
                "balance": str(result.balance),
            },
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def open_account(
        self,
        account_number: int,
        currency: Currency,
        opening_balance: Decimal = Decimal("0"),
    ) -> TransactionResult:
        balance = Money(opening_balance, currency)
        validate_amount_precision(balance.amount)
        if balance < 0:
            raise InvalidAmountError(
                f"Opening balance must not be negative, got {opening_balance}"
            )
        if self.summary_repository.read(account_number) is not None:
            raise AccountExistsError(f"Account {account_number} already exists")

        summary = AccountSummary(account_number=account_number, balance=balance)
        self.summary_repository.add(self.mapper.to_summary_entity(summary))
        self.logger.info(
            "account.opened",
            extra={"account_number": account_number, "balance": str(summary.balance)},
        )
        return self.mapper.to_balance_result(summary)

    def balance(self, account_number: int) -> TransactionResult:
        summary = self._load_validated_summary(account_number)
        return self.mapper.to_balance_result(summary)

    def deposit(self, transaction: Optional[AccountTransaction]) -> TransactionResult:
        self._log_transaction("transaction.deposit.received", transaction)
        result = self._apply(transaction, TransactionType.DEPOSIT)
        self._log_result("transaction.deposit.completed", result)
        return result

    def withdraw(self, transaction: Optional[AccountTransaction]) -> TransactionResult:
        self._log_transaction("transaction.withdraw.received", transaction)
        result = self._apply(transaction, TransactionType.WITHDRAWAL)
        self._log_result("transaction.withdraw.completed", result)
        return result

    def statement(
        self,
        account_number: int,
        statement_date: StatementDate,
    ) -> AccountStatement:
        argument_not_null("statement_date", statement_date)
        summary = self._load_validated_summary(account_number)

        entities = self.transaction_repository.get(
            account_number,
            statement_date.start_date,
            statement_date.end_date,
        )
        currency = summary.currency

        return AccountStatement(
            account_number=summary.account_number,
            currency=currency,
            date=statement_date,
            transaction_details=[
                self.mapper.to_statement_transaction(entity, currency)
                for entity in entities
            ],
        )
