# interfaces/api.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from typing import List
import logging

from schemas.task import TaskCreate, TaskResponse, TaskCreated, MessageResponse
from application.use_cases import TaskUseCases
from domain.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_use_cases(request: Request) -> TaskUseCases:
    """The service instance built by create_app() and kept on app.state."""
    return request.app.state.use_cases


@router.post("/task", response_model=TaskCreated)
def create_task(task: TaskCreate, use_cases: TaskUseCases = Depends(get_use_cases)):
    created_task = use_cases.create_task(task.to_entity())
    logger.info(f"Created task {created_task.id} due {created_task.due_date}")
    return TaskCreated(id=created_task.id)


@router.get("/task/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    task = use_cases.get_task(task_id)
    return TaskResponse.from_entity(task)


@router.delete("/task/{task_id}", response_model=MessageResponse)
def delete_task(task_id: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    if use_cases.delete_task(task_id) == 0:
        raise NotFoundError(f"task {task_id} not found")
    logger.info(f"Deleted task {task_id}")
    return MessageResponse(msg="OK")


@router.get("/due/{yy}/{mm}/{dd}", response_model=List[TaskResponse])
def get_tasks_by_due_date(yy: str, mm: str, dd: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    tasks = use_cases.list_tasks_by_due_date(yy, mm, dd)
    if not tasks:
        return JSONResponse(status_code=404, content={"msg": "no tasks for this day"})
    return [TaskResponse.from_entity(task) for task in tasks]
