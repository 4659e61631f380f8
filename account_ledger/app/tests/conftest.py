from decimal import Decimal

import pytest
from sqlmodel import Session

from ..core.db import create_engine_for_url, drop_db, init_db
from ..models import Currency
from ..services import (
    LedgerMapper,
    SummaryRepository,
    TransactionRepository,
    TransactionService,
)


@pytest.fixture
def engine():
    engine = create_engine_for_url("sqlite://")
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def service(session) -> TransactionService:
    return TransactionService(
        SummaryRepository(session),
        TransactionRepository(session),
        LedgerMapper(),
    )


@pytest.fixture
def account_1001(service: TransactionService) -> int:
    service.open_account(1001, Currency.USD, Decimal("100"))
    return 1001
