from __future__ import annotations

from collections.abc import Generator
from typing import Any, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from ..models import AccountSummaryModel, AccountTransactionModel
from .config import get_settings

LEDGER_TABLES = [AccountSummaryModel.__table__, AccountTransactionModel.__table__]


def create_engine_for_url(database_url: str) -> Engine:
    engine_args: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
        # in-memory databases live per connection, so share a single one
        if ":memory:" in database_url or database_url == "sqlite://":
            engine_args["poolclass"] = StaticPool
    return create_engine(database_url, echo=False, **engine_args)


settings = get_settings()
engine = create_engine_for_url(settings.database_url)


def init_db(bind: Optional[Engine] = None) -> None:
    """Create the account summary and ledger tables if they are missing."""
    SQLModel.metadata.create_all(bind or engine, tables=LEDGER_TABLES)


def drop_db(bind: Optional[Engine] = None) -> None:
    SQLModel.metadata.drop_all(bind or engine, tables=LEDGER_TABLES)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def set_engine(new_engine: Engine) -> None:
    global engine
    engine = new_engine
