import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CORS_ORIGINS
from .exceptions import InvalidArgument, TaskNotFound
from .routers import tasks
from .store import TaskStore

logger = logging.getLogger(__name__)


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def _invalid_argument_handler(request: Request, exc: InvalidArgument) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def _not_found_handler(request: Request, exc: TaskNotFound) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, "invalid JSON body")


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Build the API around ``store``, or around a fresh empty store."""
    app = FastAPI(
        title="Task List API",
        description="In-memory task list REST API",
        version="1.0.0",
    )
    app.state.store = store if store is not None else TaskStore()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidArgument, _invalid_argument_handler)
    app.add_exception_handler(TaskNotFound, _not_found_handler)
    app.add_exception_handler(RequestValidationError, _invalid_body_handler)

    app.include_router(tasks.router, tags=["tasks"])

    @app.get("/")
    def read_root():
        return {"message": "Task List API"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    logger.info("Task API ready tasks=%s", len(app.state.store))
    return app
