"""
Task Service - Owner-scoped task use cases
Implements: Single Responsibility Principle (SRP)

Every operation passes the AuthGate first. Ownership is keyed by the
caller Identity; the resolved username is only used for logging.
"""
from typing import List
from ..state import AppState
from ..domain.identity import Identity
from ..domain.task import Task, TaskId
from .auth_service import AuthService
import logging

logger = logging.getLogger(__name__)


class TaskService:
    """Service xử lý task business logic"""

    def __init__(self, state: AppState, auth_service: AuthService):
        self.state = state
        self.auth_service = auth_service

    async def create_task(
        self,
        identity: Identity,
        title: str,
        important: bool,
        due_date: int
    ) -> TaskId:
        """
        Create a task owned by the caller

        Retrying this call creates another task with a new id.
        """
        with self.state.lock:
            username = self.auth_service.require_session(identity)
            task_id = self.state.tasks.create(
                owner=identity,
                title=title,
                important=important,
                due_date=due_date,
                created_at=self.state.clock()
            )
        logger.info(f"[TASK] {username!r} created task #{task_id} ({title!r})")
        return task_id

    async def get_my_tasks(self, identity: Identity) -> List[Task]:
        with self.state.lock:
            self.auth_service.require_session(identity)
            return self.state.tasks.list_owned(identity)

    async def get_completed_tasks(self, identity: Identity) -> List[Task]:
        with self.state.lock:
            self.auth_service.require_session(identity)
            return self.state.tasks.list_completed_owned(identity)

    async def toggle_task_status(self, identity: Identity, title: str) -> Task:
        """
        Flip `completed` on the lowest-id owned task with this title

        Raises:
            NotAuthenticatedError, TaskNotFoundError
        """
        with self.state.lock:
            username = self.auth_service.require_session(identity)
            task = self.state.tasks.toggle_completed(identity, title)
        logger.info(f"[TASK] {username!r} set task #{task.id} completed={task.completed}")
        return task

    async def toggle_task_importance(self, identity: Identity, title: str) -> Task:
        """
        Flip `important` on the lowest-id owned task with this title

        Raises:
            NotAuthenticatedError, TaskNotFoundError
        """
        with self.state.lock:
            username = self.auth_service.require_session(identity)
            task = self.state.tasks.toggle_important(identity, title)
        logger.info(f"[TASK] {username!r} set task #{task.id} important={task.important}")
        return task

    async def delete_task(self, identity: Identity, title: str) -> Task:
        """
        Remove the lowest-id owned task with this title

        Other tasks sharing the title stay. The id is never reused.
        """
        with self.state.lock:
            username = self.auth_service.require_session(identity)
            task = self.state.tasks.delete(identity, title)
        logger.info(f"[TASK] {username!r} deleted task #{task.id} ({title!r})")
        return task
