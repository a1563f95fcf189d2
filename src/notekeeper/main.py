# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import auth_router, health_router, notes_router
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_engine, create_session_factory, create_tables
from .exceptions import NoteKeeperError

logger = get_logger("main")

SERVER_ERROR = "Server error"


def _error(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _first_validation_message(errors) -> str:
    """Human-readable text of the first schema error, e.g. ``title: Field required``."""
    if not errors:
        return "Validation failed"
    error = errors[0]
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
    return f"{'.'.join(location)}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"message": ...}`` with the right status."""

    @app.exception_handler(NoteKeeperError)
    async def app_error_handler(request: Request, exc: NoteKeeperError):
        if exc.status_code >= 500:
            logger.error("Request failed: %s", exc.message, extra={"path": request.url.path, "context": exc.context})
            return _error(exc.status_code, SERVER_ERROR)
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return _error(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(400, _first_validation_message(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", exc_info=exc, extra={"path": request.url.path})
        return _error(500, SERVER_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error", exc_info=exc, extra={"path": request.url.path})
        return _error(500, SERVER_ERROR)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one immutable settings object."""
    settings = settings or get_settings()
    setup_logging(settings)
    engine = create_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(
            "Starting NoteKeeper application",
            extra={"version": settings.app_version, "environment": settings.environment, "debug": settings.debug},
        )

        if settings.create_tables_on_startup:
            try:
                await create_tables(engine)
                logger.info("Database tables created/verified")
            except Exception as e:
                logger.error("Failed to create database tables", exc_info=e)
                raise

        yield

        logger.info("Shutting down NoteKeeper application")
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Personal notes API with search, filtering and favorites",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    register_exception_handlers(app)

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "NoteKeeper API"}

    # Basic unprefixed health endpoint for load balancers
    @app.get("/health")
    async def basic_health():
        return {"status": "ok"}

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    # reload needs an import string, so uvicorn calls the factory itself
    uvicorn.run(
        "notekeeper.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    run()
