"""
Task Domain Models

Value Objects:
- TaskId: monotonically allocated identity

Entity:
- Task: mutable record owned by a single Identity
"""

from dataclasses import dataclass, replace

from .identity import Identity

MAX_U64 = 2 ** 64 - 1


@dataclass(frozen=True, order=True)
class TaskId:
    """
    Value Object cho Task ID
    Immutable, validated identity. Ids start at 0.
    """
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("Task ID cannot be negative")

    def next(self) -> 'TaskId':
        return TaskId(self.value + 1)

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Task:
    """
    Entity cho Task

    Mutated in place only by TaskStore (toggle operations).
    Callers outside the store always receive copies.
    """
    id: TaskId
    title: str
    owner: Identity
    created_at: int
    due_date: int
    completed: bool = False
    important: bool = False

    def __post_init__(self):
        if not 0 <= self.due_date <= MAX_U64:
            raise ValueError("due_date must fit in an unsigned 64-bit integer")

    def is_owned_by(self, identity: Identity) -> bool:
        return self.owner == identity

    def matches(self, owner: Identity, title: str) -> bool:
        """Exact title match restricted to one owner"""
        return self.owner == owner and self.title == title

    def toggle_completed(self) -> None:
        self.completed = not self.completed

    def toggle_important(self) -> None:
        self.important = not self.important

    def copy(self) -> 'Task':
        return replace(self)

    def __str__(self) -> str:
        return f"Task(id={self.id}, title={self.title!r}, owner={self.owner})"
