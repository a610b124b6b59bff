"""
Tasks Router
Implements: Single Responsibility Principle (SRP)

This router handles all task endpoints. Every endpoint requires an
active session for the calling identity and only sees that identity's tasks.

Mutations address tasks by title, matching the lowest-id owned task.
"""
from fastapi import APIRouter, Depends
from typing import List
from pydantic import BaseModel, Field
from ...core.services.task_service import TaskService
from ...core.domain.identity import Identity
from ...core.domain.task import Task, MAX_U64
from ...core.exceptions import TodoAppError
from ..dependencies import get_task_service, get_caller_identity
from ..errors import to_http_exception

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


# ========== Schemas ==========
class TaskCreate(BaseModel):
    """Schema for creating a new task"""
    title: str
    important: bool
    due_date: int = Field(..., ge=0, le=MAX_U64)


class TitleRequest(BaseModel):
    """Schema for title-addressed mutations"""
    title: str


class TaskCreated(BaseModel):
    id: int


class OkResponse(BaseModel):
    ok: bool = True


class TaskResponse(BaseModel):
    """Schema for task response"""
    id: int
    title: str
    completed: bool
    important: bool
    created_at: int
    due_date: int
    owner: str

    @staticmethod
    def from_domain(task: Task) -> "TaskResponse":
        """Convert domain Task to API response"""
        return TaskResponse(
            id=task.id.value,
            title=task.title,
            completed=task.completed,
            important=task.important,
            created_at=task.created_at,
            due_date=task.due_date,
            owner=str(task.owner)
        )


# ========== Endpoints ==========
@router.post("/", response_model=TaskCreated)
async def create_task(
    data: TaskCreate,
    identity: Identity = Depends(get_caller_identity),
    service: TaskService = Depends(get_task_service)
):
    """
    Create a task owned by the caller

    Returns:
        The new task id

    Raises:
        HTTPException 401: If not logged in
    """
    try:
        task_id = await service.create_task(
            identity,
            title=data.title,
            important=data.important,
            due_date=data.due_date
        )
    except TodoAppError as e:
        raise to_http_exception(e)
    return TaskCreated(id=task_id.value)


@router.get("/", response_model=List[TaskResponse])
async def get_my_tasks(
    identity: Identity = Depends(get_caller_identity),
    service: TaskService = Depends(get_task_service)
):
    """List the caller's tasks, ascending by id"""
    try:
        tasks = await service.get_my_tasks(identity)
    except TodoAppError as e:
        raise to_http_exception(e)
    return [TaskResponse.from_domain(t) for t in tasks]


@router.get("/completed", response_model=List[TaskResponse])
async def get_completed_tasks(
    identity: Identity = Depends(get_caller_identity),
    service: TaskService = Depends(get_task_service)
):
    """List the caller's completed tasks, ascending by id"""
    try:
        tasks = await service.get_completed_tasks(identity)
    except TodoAppError as e:
        raise to_http_exception(e)
    return [TaskResponse.from_domain(t) for t in tasks]


@router.post("/toggle-status", response_model=OkResponse)
async def toggle_task_status(
    data: TitleRequest,
    identity: Identity = Depends(get_caller_identity),
    service: TaskService = Depends(get_task_service)
):
    """
    Flip the completed flag

    Raises:
        HTTPException 401: If not logged in
        HTTPException 404: If no owned task has this title
    """
    try:
        await service.toggle_task_status(identity, data.title)
    except TodoAppError as e:
        raise to_http_exception(e)
    return OkResponse()


@router.post("/toggle-importance", response_model=OkResponse)
async def toggle_task_importance(
    data: TitleRequest,
    identity: Identity = Depends(get_caller_identity),
    service: TaskService = Depends(get_task_service)
):
    """
    Flip the important flag

    Raises:
        HTTPException 401: If not logged in
        HTTPException 404: If no owned task has this title
    """
    try:
        await service.toggle_task_importance(identity, data.title)
    except TodoAppError as e:
        raise to_http_exception(e)
    return OkResponse()


@router.post("/delete", response_model=OkResponse)
async def delete_task(
    data: TitleRequest,
    identity: Identity = Depends(get_caller_identity),
    service: TaskService = Depends(get_task_service)
):
    """
    Delete the lowest-id owned task with this title

    Raises:
        HTTPException 401: If not logged in
        HTTPException 404: If no owned task has this title
    """
    try:
        await service.delete_task(identity, data.title)
    except TodoAppError as e:
        raise to_http_exception(e)
    return OkResponse()
