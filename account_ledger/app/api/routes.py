from datetime import datetime

from fastapi import APIRouter, Depends, status

from ..core.config import get_settings
from ..core.dependencies import get_mapper, get_transaction_service
from ..models import (
    AccountOpenRequest,
    AccountTransaction,
    MoneyMovementRequest,
    StatementDate,
    StatementResponse,
    TransactionResponse,
)
from ..services import LedgerMapper, TransactionService


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def open_account(
    payload: AccountOpenRequest,
    service: TransactionService = Depends(get_transaction_service),
    mapper: LedgerMapper = Depends(get_mapper),
) -> TransactionResponse:
    currency = payload.currency or get_settings().default_currency
    result = service.open_account(payload.account_number, currency, payload.opening_balance)
    return mapper.to_transaction_response(result)

@router.get("/{account_number}/balance", response_model=TransactionResponse)
def get_balance(
    account_number: int,
    service: TransactionService = Depends(get_transaction_service),
    mapper: LedgerMapper = Depends(get_mapper),
) -> TransactionResponse:
    return mapper.to_transaction_response(service.balance(account_number))

@router.post("/{account_number}/deposit", response_model=TransactionResponse)
def deposit(
    account_number: int,
    payload: MoneyMovementRequest,
    service: TransactionService = Depends(get_transaction_service),
    mapper: LedgerMapper = Depends(get_mapper),
) -> TransactionResponse:
    transaction = AccountTransaction(
        account_number=account_number,
        amount=payload.amount,
        description=payload.description,
    )
    return mapper.to_transaction_response(service.deposit(transaction))

@router.post("/{account_number}/withdraw", response_model=TransactionResponse)
def withdraw(
    account_number: int,
    payload: MoneyMovementRequest,
    service: TransactionService = Depends(get_transaction_service),
    mapper: LedgerMapper = Depends(get_mapper),
) -> TransactionResponse:
    transaction = AccountTransaction(
        account_number=account_number,
        amount=payload.amount,
        description=payload.description,
    )
    return mapper.to_transaction_response(service.withdraw(transaction))

@router.get("/{account_number}/statement", response_model=StatementResponse)
def get_statement(
    account_number: int,
    start_date: datetime,
    end_date: datetime,
    service: TransactionService = Depends(get_transaction_service),
    mapper: LedgerMapper = Depends(get_mapper),
) -> StatementResponse:
    statement = service.statement(account_number, StatementDate(start_date, end_date))
    return mapper.to_statement_response(statement)

__all__ = ["router"]
