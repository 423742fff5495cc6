import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, configure_logging
from database import Database
from routers import ALL_ROUTERS
from services.bootstrap import RetryPolicy, run_bootstrap

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _store_message(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    db: Database = app.state.db
    if settings.bootstrap_on_startup:
        # A BootstrapError propagates and aborts startup
        report = await run_in_threadpool(
            run_bootstrap, db, RetryPolicy.from_settings(settings), settings.bootstrap_reset
        )
        app.state.bootstrap_report = report
    yield
    db.dispose()


def register_error_handlers(app: FastAPI) -> None:
    """Every failure is answered with {"error": message}."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == 404 and message == "Not Found":
            message = "Route not found"
        return _error(exc.status_code, str(message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        messages = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
        return _error(422, "; ".join(messages))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.error("%s %s rejected by constraint: %s", request.method, request.url.path, exc.orig)
        return _error(400, _store_message(exc))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("%s %s store error: %s", request.method, request.url.path, exc)
        return _error(500, _store_message(exc))


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
    if db is None:
        db = Database.from_settings(settings)

    # App instance
    app = FastAPI(title="Property Records API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(app)

    for router in ALL_ROUTERS:
        app.include_router(router)

    @app.get("/health", tags=["diagnostics"])
    def health(request: Request):
        return {"status": "ok", "database": request.app.state.db.check_connection()}

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run("main:create_app", factory=True, host="0.0.0.0", port=settings.port)
