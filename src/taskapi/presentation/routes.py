from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.setup.api_config import get_api_settings
from src.taskapi.application.services import TaskService, UserService
from src.taskapi.domain.models import CreateTaskRequest, RegisterUserRequest, Status, Task, User

router = APIRouter()

_settings = get_api_settings()


class MessageResponse(BaseModel):
    message: str = Field(..., description="Outcome message.")


class FailureResponse(MessageResponse):
    error: str = Field(..., description="Underlying error message.")


class HealthResponse(BaseModel):
    status: str = "ok"


def get_task_service() -> TaskService:
    return TaskService()


def get_user_service() -> UserService:
    return UserService()


def to_response(status: Status) -> JSONResponse:
    """Render a service ``Status`` as a JSON response with its code."""
    if status.success:
        content = jsonable_encoder(status.data, by_alias=True)
    else:
        content = status.error_body()
    return JSONResponse(status_code=status.code, content=content)


_FAILURE = {500: {"model": FailureResponse, "description": "Unexpected data-access failure."}}


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health() -> HealthResponse:
    return HealthResponse()


@router.post(
    "/tasks",
    status_code=201,
    response_model=Task,
    tags=["tasks"],
    summary="Create a task",
    description="Creates a task owned by an existing user. The title must not be blank.",
    responses={
        400: {"model": MessageResponse, "description": "Title is missing or blank."},
        404: {"model": MessageResponse, "description": "Owning user does not exist."},
        **_FAILURE,
    },
)
async def create_task(
    body: CreateTaskRequest,
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    return to_response(await service.create_task(body))


@router.get(
    "/tasks/{task_id}",
    response_model=Task,
    tags=["tasks"],
    summary="Fetch a task",
    responses={404: {"model": MessageResponse}, **_FAILURE},
)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    return to_response(await service.get_task(task_id))


@router.post(
    "/users",
    status_code=201,
    response_model=User,
    tags=["users"],
    summary="Register a user",
    responses={
        400: {"model": MessageResponse, "description": "Blank field or e-mail already taken."},
        **_FAILURE,
    },
)
async def register_user(
    body: RegisterUserRequest,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return to_response(await service.register_user(body))


@router.get(
    "/users/{user_id}",
    response_model=User,
    tags=["users"],
    summary="Fetch a user",
    responses={404: {"model": MessageResponse}, **_FAILURE},
)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return to_response(await service.get_user(user_id))


@router.get(
    "/users/{user_id}/tasks",
    response_model=list[Task],
    tags=["tasks"],
    summary="List a user's tasks",
    responses={404: {"model": MessageResponse}, **_FAILURE},
)
async def list_user_tasks(
    user_id: str,
    limit: int = Query(_settings.DEFAULT_PAGE_SIZE, ge=1, le=_settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    return to_response(await service.list_user_tasks(user_id, limit=limit, offset=offset))
