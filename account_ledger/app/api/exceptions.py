from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountExistsError,
    AccountMismatchError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerError,
    NullArgumentError,
    StoreFailureError,
)


logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[LedgerError], int] = {
    AccountNotFoundError: 404,
    AccountMismatchError: 409,
    AccountExistsError: 409,
    InsufficientFundsError: 409,
    InvalidAmountError: 400,
    NullArgumentError: 400,
    StoreFailureError: 503,
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(type(exc), 400)
        if isinstance(exc, StoreFailureError):
            logger.error("request.store_failure", extra={"path": request.url.path})
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})
