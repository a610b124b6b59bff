from fastapi import FastAPI
from contextlib import asynccontextmanager
import uvicorn
import logging
import sys

from .core.container import container, init_container
from .core.logger import ListLogHandler, log_manager

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "INFO", log_file: str = "", buffer_size: int = 2000):
    """
    Configure root logging once at startup

    - stdout handler
    - optional file handler
    - ListLogHandler feeding the /system/logs buffer
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    log_manager.resize(buffer_size)
    buffer_handler = ListLogHandler()
    buffer_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers.append(buffer_handler)

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    state = container.app_state()
    logger.info(f"[STARTUP] State ready: {state.stats()}")
    logger.info(f"[STARTUP] Caller identity header: {container.config.identity_header()}")

    yield

    # --- SHUTDOWN ---
    # Nothing is persisted: all users, sessions and tasks are dropped here.
    logger.warning(f"[SHUTDOWN] Discarding in-memory state: {state.stats()}")


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    init_container()
    configure_logging(
        level=container.config.log_level(),
        log_file=container.config.log_file(),
        buffer_size=container.config.log_buffer_size()
    )
    application = FastAPI(title="Todo App Backend", lifespan=lifespan)

    # ========== Include API Routers ==========
    from .api.routers import auth, tasks, system

    application.include_router(auth.router, prefix="/api")
    application.include_router(tasks.router, prefix="/api")
    application.include_router(system.router, prefix="/api")
    return application


app = create_app()


def run():
    """Console entry point: serve with uvicorn (logging is set up by create_app)"""
    uvicorn.run(
        "todo_app.main:app",
        host=container.config.host(),
        port=container.config.port(),
        reload=False,
        log_config=None
    )


if __name__ == "__main__":
    run()
