"""
Services Package

Business logic layer implementing the use cases on top of AppState.
"""

from .auth_service import AuthService
from .task_service import TaskService

__all__ = [
    'AuthService',
    'TaskService',
]
