"""
System Router
Implements: Single Responsibility Principle (SRP)

This router handles system endpoints:
- Health check with store counters
- Recent log lines from the in-memory buffer
"""
from fastapi import APIRouter, Depends, Query
from ...core.state import AppState
from ...core.logger import log_manager
from ..dependencies import get_app_state

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health(state: AppState = Depends(get_app_state)):
    """
    Liveness check

    Returns:
        Status plus counts of users, sessions and tasks
    """
    return {"ok": True, **state.stats()}


@router.get("/logs")
async def recent_logs(limit: int = Query(100, ge=1)):
    """
    Recent log lines, oldest first

    Args:
        limit: Maximum number of lines to return. Values above the
            buffer size (TODO_APP_LOG_BUFFER_SIZE) return the whole buffer.
    """
    return {"logs": log_manager.recent(limit)}
