from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.setup.api_config import ApiSettings, get_api_settings
from src.setup.app_config import Container, configure_di
from src.setup.logging_config import configure_logging
from src.tasktracker.presentation.errors import register_exception_handlers
from src.tasktracker.presentation.middleware import (
    ExceptionHandlingMiddleware,
    RequestLoggingMiddleware,
)
from src.tasktracker.presentation.routes import router as tasks_router


def create_app(
    settings: ApiSettings | None = None,
    container: Container | None = None,
) -> FastAPI:
    if settings is None:
        settings = get_api_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_logging()
        active = configure_di(container)
        await active.database.create_schema()
        yield
        await active.database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Task tracking API with cursor pagination",
        lifespan=lifespan,
    )

    # Last added runs first: request logging assigns the trace id the error handler reports.
    app.add_middleware(ExceptionHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware, log_path=settings.REQUEST_LOG_PATH)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(tasks_router, prefix="")
    return app


app = create_app()
