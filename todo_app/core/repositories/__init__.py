"""
Repository Pattern Implementation

In-memory stores behind the services:
- UserRegistry: username -> Account
- SessionTable: Identity -> username
- TaskStore: TaskId -> Task, plus id allocation

Benefits:
- Services never touch the dicts directly
- Easy to swap for a durable implementation later
"""

from .base import BaseRepository
from .user_registry import UserRegistry
from .session_table import SessionTable
from .task_store import TaskStore

__all__ = [
    "BaseRepository",
    "UserRegistry",
    "SessionTable",
    "TaskStore",
]
