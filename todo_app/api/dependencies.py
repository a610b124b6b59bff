"""
FastAPI Dependencies

Provides dependency injection for FastAPI endpoints

Implements Dependency Inversion Principle (DIP):
- Endpoints depend on services, never on the stores directly
- Implementations injected via container

Usage in endpoints:
    @router.get("/tasks/")
    async def get_my_tasks(
        identity: Identity = Depends(get_caller_identity),
        service: TaskService = Depends(get_task_service)
    ):
        return await service.get_my_tasks(identity)
"""

from fastapi import Depends, Request
from ..core.container import container, DEFAULT_IDENTITY_HEADER
from ..core.state import AppState
from ..core.domain.identity import Identity
from ..core.services.auth_service import AuthService
from ..core.services.task_service import TaskService


# ========== State ==========
def get_app_state() -> AppState:
    """
    Dependency để lấy AppState

    Returns:
        The process-wide AppState singleton

    Tests override this to inject a fresh state.
    """
    return container.app_state()


# ========== Caller Identity ==========
def get_identity_header_name() -> str:
    return container.config.identity_header() or DEFAULT_IDENTITY_HEADER


def get_caller_identity(request: Request) -> Identity:
    """
    Dependency để lấy calling identity

    Reads the identity header set by the upstream authenticated channel.
    The value is used verbatim. Requests with an absent or empty header
    are attributed to the anonymous identity.
    """
    raw = request.headers.get(get_identity_header_name(), "")
    if not raw:
        return Identity.anonymous()
    return Identity(raw)


# ========== Services ==========
def get_auth_service(state: AppState = Depends(get_app_state)) -> AuthService:
    """
    Dependency để lấy AuthService

    Args:
        state: AppState (auto-injected)
    """
    return AuthService(state)


def get_task_service(
    state: AppState = Depends(get_app_state),
    auth_service: AuthService = Depends(get_auth_service)
) -> TaskService:
    """
    Dependency để lấy TaskService

    Args:
        state: AppState (auto-injected)
        auth_service: AuthService used as the session gate (auto-injected)
    """
    return TaskService(state, auth_service)
