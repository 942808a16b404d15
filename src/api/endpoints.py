"""API endpoints for task management."""

import re
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Request, Response
from pydantic import ValidationError

from models import Task, TaskInput
from store import TaskStore, TaskNotFoundError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

# Optional sign followed by ASCII digits, nothing else
TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# IDs must fit a signed 64-bit integer
TASK_ID_MIN = -2 ** 63
TASK_ID_MAX = 2 ** 63 - 1


def get_store(request: Request) -> TaskStore:
    """Get the task store owned by the running application."""
    return request.app.state.task_store


def parse_task_id(task_id: str) -> int:
    """Turn the path remainder after /tasks/ into a task ID."""
    if TASK_ID_PATTERN.fullmatch(task_id):
        value = int(task_id)
        if TASK_ID_MIN <= value <= TASK_ID_MAX:
            return value

    logger.debug(f"Rejected task ID {task_id!r}")
    raise HTTPException(status_code=400, detail="Invalid task ID")


def decode_task_input(raw: bytes) -> TaskInput:
    """Decode a create/replace body, mapping failures to 400."""
    try:
        return TaskInput.model_validate_json(raw)
    except ValidationError as e:
        logger.debug(f"Rejected task body: {e}")
        raise HTTPException(status_code=400, detail="Invalid task body")


# Collection endpoints
@router.get("/tasks", response_model=List[Task])
async def list_tasks(store: TaskStore = Depends(get_store)):
    """List all tasks. Order is not guaranteed."""
    return store.list()


@router.post("/tasks", status_code=201, response_model=Task)
async def create_task(request: Request, store: TaskStore = Depends(get_store)):
    """Create a new task. Any ID in the body is ignored.

    The body is decoded as JSON whatever its Content-Type, same as replace.
    """
    task = decode_task_input(await request.body())
    created = store.create(task.name, task.done)

    logger.info(f"Created task '{created.name}' (ID: {created.id})")
    return created


# Item endpoints
@router.get("/tasks/{task_id:path}", response_model=Task)
async def get_task(
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_store)
):
    """Get a specific task by ID."""
    try:
        return store.get(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.put("/tasks/{task_id:path}", response_model=Task)
async def replace_task(
    request: Request,
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_store)
):
    """Replace name and done of a task.

    The task must exist before the body is even read, so an unknown ID is a
    404 whatever the body holds.
    """
    try:
        store.get(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")

    task = decode_task_input(await request.body())

    # Deleted while the body was being read
    try:
        updated = store.replace(task_id, task.name, task.done)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")

    logger.info(f"Updated task {task_id}")
    return updated


@router.delete("/tasks/{task_id:path}", status_code=204)
async def delete_task(
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_store)
):
    """Delete a task."""
    try:
        store.delete(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")

    logger.info(f"Deleted task {task_id}")
    return Response(status_code=204)


@router.api_route(
    "/tasks/{task_id:path}",
    methods=["POST", "PATCH", "HEAD", "OPTIONS", "TRACE", "CONNECT"],
    include_in_schema=False
)
async def task_method_not_allowed(task_id: int = Depends(parse_task_id)):
    """The ID is checked before the method, so a bad ID is still a 400."""
    raise HTTPException(
        status_code=405,
        detail="Method Not Allowed",
        headers={"Allow": "GET, PUT, DELETE"}
    )
