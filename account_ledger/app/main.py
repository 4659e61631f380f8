import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router
from .core.config import get_settings
from .core.db import init_db

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(
        "ledger.started",
        extra={"default_currency": settings.default_currency.value},
    )
    yield

app = FastAPI(
    title=settings.app_name,
    description="Account balances, deposits, withdrawals and statements.",
    lifespan=lifespan,
)

app.include_router(accounts_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok", "default_currency": settings.default_currency.value}
