from __future__ import annotations

from decimal import Decimal

from ..core.errors import StoreFailureError
from ..models import (
    AMOUNT_DECIMAL_PLACES,
    AccountStatement,
    AccountSummary,
    AccountSummaryModel,
    AccountTransaction,
    AccountTransactionModel,
    Currency,
    Money,
    MoneySchema,
    StatementResponse,
    StatementTransaction,
    StatementTransactionResponse,
    TransactionResponse,
    TransactionResult,
    TransactionType,
    as_utc,
)


class LedgerMapper:
    """Converts between domain types, table rows and API schemas."""

    # Storage ------------------------------------------------------------
    def to_summary(self, entity: AccountSummaryModel | None) -> AccountSummary | None:
        if entity is None:
            return None
        return AccountSummary(
            account_number=entity.account_number,
            balance=Money(self.from_units(entity.balance), self.parse_currency(entity.currency)),
        )

    def to_summary_entity(self, summary: AccountSummary) -> AccountSummaryModel:
        return AccountSummaryModel(
            account_number=summary.account_number,
            balance=self.to_units(summary.balance.amount),
            currency=summary.currency.value,
        )

    def to_transaction_entity(
        self, transaction: AccountTransaction
    ) -> AccountTransactionModel:
        return AccountTransactionModel(
            account_number=transaction.account_number,
            amount=self.to_units(transaction.amount),
            transaction_type=transaction.transaction_type.value,
            current_balance=self.to_units(transaction.current_balance.amount),
            date=transaction.date,
            description=transaction.description,
        )

    def to_statement_transaction(
        self, entity: AccountTransactionModel, currency: Currency
    ) -> StatementTransaction:
        # stored rows carry raw amounts; the account's currency is attached here
        return StatementTransaction(
            transaction_type=self.parse_transaction_type(entity.transaction_type),
            date=as_utc(entity.date),
            description=entity.description,
            amount=Money(self.from_units(entity.amount), currency),
            current_balance=Money(self.from_units(entity.current_balance), currency),
        )

    # Results ------------------------------------------------------------
    def to_balance_result(self, summary: AccountSummary) -> TransactionResult:
        return TransactionResult(
            account_number=summary.account_number,
            balance=summary.balance,
        )

    def to_transaction_result(
        self, entity: AccountTransactionModel, balance: Money
    ) -> TransactionResult:
        return TransactionResult(
            account_number=entity.account_number,
            balance=balance,
            amount=self.from_units(entity.amount),
            transaction_type=self.parse_transaction_type(entity.transaction_type),
            current_balance=Money(self.from_units(entity.current_balance), balance.currency),
            date=as_utc(entity.date),
            description=entity.description,
        )

    # API ----------------------------------------------------------------
    def to_money_schema(self, money: Money) -> MoneySchema:
        return MoneySchema(amount=money.amount, currency=money.currency)

    def to_transaction_response(self, result: TransactionResult) -> TransactionResponse:
        return TransactionResponse(
            account_number=result.account_number,
            balance=self.to_money_schema(result.balance),
            amount=result.amount,
            transaction_type=result.transaction_type,
            current_balance=(
                self.to_money_schema(result.current_balance)
                if result.current_balance is not None
                else None
            ),
            date=result.date,
            description=result.description,
        )

    def to_statement_response(self, statement: AccountStatement) -> StatementResponse:
        return StatementResponse(
            account_number=statement.account_number,
            currency=statement.currency,
            start_date=statement.date.start_date,
            end_date=statement.date.end_date,
            transaction_details=[
                StatementTransactionResponse(
                    transaction_type=item.transaction_type,
                    date=item.date,
                    description=item.description,
                    amount=self.to_money_schema(item.amount),
                    current_balance=self.to_money_schema(item.current_balance),
                )
                for item in statement.transaction_details
            ],
        )

    # Conversion ---------------------------------------------------------
    @staticmethod
    def parse_currency(code: str) -> Currency:
        try:
            return Currency(code)
        except ValueError as exc:
            raise StoreFailureError(f"Unknown currency code {code!r} in store") from exc

    @staticmethod
    def parse_transaction_type(tag: str) -> TransactionType:
        try:
            return TransactionType(tag)
        except ValueError as exc:
            raise StoreFailureError(f"Unknown transaction type {tag!r} in store") from exc

    @staticmethod
    def to_units(amount: Decimal) -> int:
        # exact for amounts validated to AMOUNT_DECIMAL_PLACES
        return int(amount.scaleb(AMOUNT_DECIMAL_PLACES))

    @staticmethod
    def from_units(units: int) -> Decimal:
        return Decimal(units).scaleb(-AMOUNT_DECIMAL_PLACES)
