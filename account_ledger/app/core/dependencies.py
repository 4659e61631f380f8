from fastapi import Depends
from sqlmodel import Session

from ..services import (
    LedgerMapper,
    SummaryRepository,
    TransactionRepository,
    TransactionService,
)
from .db import get_session

def get_mapper() -> LedgerMapper:
    return LedgerMapper()

def get_transaction_service(
    session: Session = Depends(get_session),
    mapper: LedgerMapper = Depends(get_mapper),
) -> TransactionService:
    return TransactionService(
        SummaryRepository(session),
        TransactionRepository(session),
        mapper,
    )
