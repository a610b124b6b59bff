"""
Dependency Injection Container

Implements Dependency Inversion Principle (DIP):
- Central place to configure dependencies
- Easy to swap implementations
- Easy to test (can override providers)

Uses dependency-injector library for IoC container
"""

from dependency_injector import containers, providers

from .state import AppState
from .services.auth_service import AuthService
from .services.task_service import TaskService

DEFAULT_IDENTITY_HEADER = "X-Caller-Identity"


class Container(containers.DeclarativeContainer):
    """
    Main DI Container

    Manages all dependencies in the application:
    - Configuration (environment variables)
    - AppState (single instance per process)
    - Services
    """

    # ========== Configuration ==========
    config = providers.Configuration()

    # ========== State ==========
    app_state = providers.Singleton(
        AppState.create
    )

    # ========== Services ==========
    auth_service = providers.Factory(
        AuthService,
        state=app_state
    )

    task_service = providers.Factory(
        TaskService,
        state=app_state,
        auth_service=auth_service
    )


# Global container instance
container = Container()


def init_container():
    """
    Initialize container

    Call this on app startup. Reads TODO_APP_* environment variables.
    """
    container.config.host.from_env("TODO_APP_HOST", default="127.0.0.1")
    container.config.port.from_env("TODO_APP_PORT", default=8000, as_=int)
    container.config.log_level.from_env("TODO_APP_LOG_LEVEL", default="INFO")
    container.config.log_file.from_env("TODO_APP_LOG_FILE", default="")
    container.config.identity_header.from_env(
        "TODO_APP_IDENTITY_HEADER", default=DEFAULT_IDENTITY_HEADER
    )
    container.config.log_buffer_size.from_env("TODO_APP_LOG_BUFFER_SIZE", default=2000, as_=int)


def reset_container():
    """
    Reset container

    Drops the AppState singleton, so the next request sees empty stores.
    Useful for testing.
    """
    container.reset_singletons()
