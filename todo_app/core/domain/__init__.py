"""
Domain Models Package

Domain models for the todo service, independent of the transport layer.

- Value Objects: Identity, TaskId
- Entities: Account, Task
"""

from .identity import Identity, ANONYMOUS_IDENTITY_TEXT
from .account import Account
from .task import Task, TaskId, MAX_U64

__all__ = [
    # Identity
    "Identity",
    "ANONYMOUS_IDENTITY_TEXT",

    # Account
    "Account",

    # Task
    "Task",
    "TaskId",
    "MAX_U64",
]
