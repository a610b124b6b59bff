"""
Task Store

Mapping TaskId -> Task plus the id generator.

Ids come from a counter that starts at 0, grows by exactly one per
create and is never reset, so ids are never reused after delete.
Entries are inserted in ascending id order and Python dicts keep
insertion order, so plain iteration is ascending by id.
"""

import logging
from typing import List, Optional

from .base import BaseRepository
from ..domain.identity import Identity
from ..domain.task import Task, TaskId
from ..exceptions import TaskNotFoundError

logger = logging.getLogger(__name__)


class TaskStore(BaseRepository[TaskId, Task]):
    """
    Store cho tasks

    Every query/mutation is scoped to an owner identity.
    Returned tasks are copies.
    """

    def __init__(self):
        super().__init__()
        self._next_id = TaskId(0)

    @property
    def next_id(self) -> TaskId:
        """Id the next create() will allocate"""
        return self._next_id

    def _allocate_id(self) -> TaskId:
        task_id = self._next_id
        self._next_id = task_id.next()
        return task_id

    def create(
        self,
        owner: Identity,
        title: str,
        important: bool,
        due_date: int,
        created_at: int
    ) -> TaskId:
        """
        Tạo task mới

        Returns:
            The allocated TaskId
        """
        # Build before allocating so a rejected due_date does not burn an id
        task = Task(
            id=self._next_id,
            title=title,
            owner=owner,
            created_at=created_at,
            due_date=due_date,
            completed=False,
            important=important
        )
        task_id = self._allocate_id()
        self._items[task_id] = task
        logger.debug(f"Task {task_id} created for {owner}")
        return task_id

    def list_owned(self, owner: Identity) -> List[Task]:
        """All tasks of owner, ascending by id"""
        return [t.copy() for t in self._items.values() if t.is_owned_by(owner)]

    def list_completed_owned(self, owner: Identity) -> List[Task]:
        """Completed tasks of owner, ascending by id"""
        return [
            t.copy() for t in self._items.values()
            if t.is_owned_by(owner) and t.completed
        ]

    def find_by_title(self, owner: Identity, title: str) -> Optional[Task]:
        """
        Lowest-id owned task whose title matches exactly

        When an owner has several tasks with the same title only this
        one is reachable by title-based operations.
        """
        for task in self._items.values():
            if task.matches(owner, title):
                return task
        return None

    def _require(self, owner: Identity, title: str) -> Task:
        task = self.find_by_title(owner, title)
        if task is None:
            raise TaskNotFoundError("Task not found")
        return task

    def toggle_completed(self, owner: Identity, title: str) -> Task:
        task = self._require(owner, title)
        task.toggle_completed()
        return task.copy()

    def toggle_important(self, owner: Identity, title: str) -> Task:
        task = self._require(owner, title)
        task.toggle_important()
        return task.copy()

    def delete(self, owner: Identity, title: str) -> Task:
        """
        Xóa task

        Returns:
            The removed task

        Raises:
            TaskNotFoundError: If no owned task has this title
        """
        task = self._require(owner, title)
        del self._items[task.id]
        logger.debug(f"Task {task.id} deleted for {owner}")
        return task
