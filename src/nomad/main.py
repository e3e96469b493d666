from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text

from nomad.config import settings
from nomad.db.catalog import init_catalog
from nomad.db.session import shutdown
from nomad.dependencies import DB
from nomad.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    MissingInformationError,
    NotFoundError,
    StepValidationError,
)
from nomad.logging import get_logger
from nomad.middleware import RequestIDMiddleware
from nomad.routers import auth, booking, destination, hotel
from nomad.schemas.error import ErrorDetail, ErrorResponse
from nomad.schemas.fields import field_errors
from nomad.services.auth import SessionStore
from nomad.services.booking import MockPaymentGateway
from nomad.services.wizard import WizardStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager: code before yield runs on startup, after yield on shutdown.

    Startup: load the in-memory catalog, open empty session and wizard stores.
    Shutdown: drop every session and wizard, then discard the catalog.
    """
    await init_catalog()
    app.state.sessions = SessionStore()
    app.state.wizards = WizardStore(ttl_seconds=settings.wizard_ttl_seconds)
    app.state.payment_gateway = MockPaymentGateway()
    yield
    app.state.sessions.clear()
    app.state.wizards.clear()
    await shutdown()


app = FastAPI(title="Nomad Navigator", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(destination.router)
app.include_router(hotel.router)
app.include_router(booking.router)
app.include_router(auth.router)


def _error_json(code: str, message: str, fields: dict[str, str] | None = None) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    error = ErrorDetail(code=code, message=message, fields=fields)
    return ErrorResponse(error=error).model_dump(exclude_none=True)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with one message per failing field."""
    fields = field_errors(exc.errors(), skip_prefix=True)
    return JSONResponse(
        status_code=422,
        content=_error_json("validation_error", "Please check the highlighted fields.", fields),
    )


@app.exception_handler(StepValidationError)
async def step_validation_handler(request: Request, exc: StepValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422, content=_error_json("validation_error", exc.message, exc.fields)
    )


@app.exception_handler(MissingInformationError)
async def missing_information_handler(
    request: Request, exc: MissingInformationError
) -> JSONResponse:
    """Return 400 when navigation state is incomplete; clients send the user home."""
    return JSONResponse(status_code=400, content=_error_json("missing_information", exc.message))


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Return 404 with the entity details."""
    return JSONResponse(status_code=404, content=_error_json("not_found", exc.message))


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    """Return 409, e.g. for a wizard event not allowed from the current step."""
    return JSONResponse(status_code=409, content=_error_json("conflict", exc.message))


@app.exception_handler(AuthenticationError)
async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(status_code=401, content=_error_json("unauthorized", exc.message))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for generic domain-level violations."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json("domain_error", exc.message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a safe error response.

    - Logs full exception with traceback (includes request_id from context)
    - Returns generic error to client (no stack traces leaked)
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content=_error_json("internal_error", "Internal server error"),
    )


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check endpoint; verifies the catalog store answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
