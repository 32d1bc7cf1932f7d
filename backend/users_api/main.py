"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from users_api.api.v1 import users
from users_api.core.config import settings
from users_api.core.errors import UserServiceError
from users_api.core.logging import get_logger, setup_logging
from users_api.db.session import engine, init_models


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.effective_log_level, settings.LOG_FORMAT)
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV, port=settings.PORT)
    await init_models(engine)
    yield
    await engine.dispose()
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="CRUD API over a single users table",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)


@app.exception_handler(UserServiceError)
async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
    """Render domain errors as `{"message": ...}`."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Any storage failure surfaces as a generic 500."""
    get_logger("api.errors").error(
        "Database error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"},
    )


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "users_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
