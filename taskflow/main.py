import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskflow.application.use_cases import TaskUseCases
from taskflow.config import Settings, load_settings
from taskflow.infrastructure.storage import MemoryTaskStorage, TaskStorage, seed_demo_tasks
from taskflow.interfaces.api import router as task_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, storage: Optional[TaskStorage] = None
) -> FastAPI:
    """Build the API around a single store handle.

    A fresh in-memory store (seeded unless disabled) is used when ``storage``
    is not given.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    if storage is None:
        storage = MemoryTaskStorage()
        if settings.seed_demo:
            seed_demo_tasks(storage)

    app = FastAPI(title="TaskFlow")
    app.state.settings = settings
    app.state.use_cases = TaskUseCases(storage)
    app.include_router(task_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info("CORS origins: %s", settings.cors_origins)
    logger.info("TaskFlow ready with %d tasks", storage.count_tasks())
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
