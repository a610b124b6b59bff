"""
Application State

AppState owns every store of the process. It is constructed once by the
DI container and handed to each service; there are no module-level maps.

Lock discipline:
- AppState.lock guards all three stores together
- Stores are touched in the order UserRegistry -> SessionTable -> TaskStore
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .credentials import CredentialPolicy, PlaintextCredentialPolicy
from .repositories.user_registry import UserRegistry
from .repositories.session_table import SessionTable
from .repositories.task_store import TaskStore


def wall_clock_ns() -> int:
    """Current wall time in nanoseconds"""
    return time.time_ns()


@dataclass
class AppState:
    users: UserRegistry
    sessions: SessionTable
    tasks: TaskStore
    clock: Callable[[], int] = wall_clock_ns
    lock: threading.RLock = field(default_factory=threading.RLock)

    @staticmethod
    def create(
        clock: Optional[Callable[[], int]] = None,
        credential_policy: Optional[CredentialPolicy] = None
    ) -> 'AppState':
        """Build an empty state with fresh stores"""
        clock = clock or wall_clock_ns
        return AppState(
            users=UserRegistry(clock, credential_policy or PlaintextCredentialPolicy()),
            sessions=SessionTable(),
            tasks=TaskStore(),
            clock=clock
        )

    def stats(self) -> dict:
        with self.lock:
            return {
                "users": self.users.count(),
                "sessions": self.sessions.count(),
                "tasks": self.tasks.count(),
                "next_task_id": self.tasks.next_id.value,
            }
