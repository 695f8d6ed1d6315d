from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from application.use_cases import TaskUseCases
from domain.errors import PersistenceError, TaskServiceError
from infrastructure.config import Settings
from infrastructure.database import Database
from infrastructure.logging_setup import setup_logging
from interfaces.api import router as task_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app with its own store client; nothing is shared at module level."""
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(title="Task Service")
    app.state.settings = settings
    app.state.use_cases = TaskUseCases(Database(settings.db_path))
    app.include_router(task_router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    @app.exception_handler(TaskServiceError)
    async def handle_service_error(request: Request, exc: TaskServiceError):
        if isinstance(exc, PersistenceError):
            # the store already logged the driver error with its traceback
            logger.warning(f"{request.method} {request.url.path} failed to {exc.operation}")
        else:
            logger.debug(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        logger.debug(f"Invalid request body for {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "invalid JSON"})

    logger.info(f"Task service ready, store at {settings.db_path}")
    return app


if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)
