import logging
from typing import cast

import inject

from src.taskapi.domain.models import (
    CreateTaskRequest,
    NewTask,
    NewUser,
    RegisterUserRequest,
    Status,
)
from src.taskapi.domain.repositories import TaskRepository, UserRepository
from src.taskapi.domain.results import Failed, NotFound, settle

TITLE_EMPTY = "Title cannot be empty"
NAME_EMPTY = "Name cannot be empty"
EMAIL_EMPTY = "Email cannot be empty"
EMAIL_TAKEN = "A user with this email already exists"
USER_NOT_FOUND = "User not found"
TASK_NOT_FOUND = "Task not found"

CREATE_TASK_FAILED = "An error occurred while creating the task"
FETCH_TASK_FAILED = "An error occurred while fetching the task"
LIST_TASKS_FAILED = "An error occurred while listing tasks"
CREATE_USER_FAILED = "An error occurred while creating the user"
FETCH_USER_FAILED = "An error occurred while fetching the user"


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


class TaskService:
    """Creates and reads tasks on behalf of existing users."""

    def __init__(
        self,
        users: UserRepository | None = None,
        tasks: TaskRepository | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._users = users or cast(UserRepository, inject.instance(UserRepository))
        self._tasks = tasks or cast(TaskRepository, inject.instance(TaskRepository))
        self._logger = logger or logging.getLogger(__name__)

    async def create_task(self, request: CreateTaskRequest) -> Status:
        """
        Validate the title, confirm the owning user exists, then insert the task.

        The title is checked on its trimmed form but stored exactly as supplied.
        """
        if _is_blank(request.title):
            return Status.rejected(TITLE_EMPTY)

        lookup = await settle(self._users.find_user(request.user_id))
        if isinstance(lookup, Failed):
            return self._failure("Error creating task: %s", CREATE_TASK_FAILED, lookup)
        if isinstance(lookup, NotFound):
            return Status.not_found(USER_NOT_FOUND)

        new_task = NewTask(
            title=cast(str, request.title),
            description=request.description,
            user_id=request.user_id,
        )
        created = await settle(self._tasks.create_task(new_task))
        if isinstance(created, Failed):
            return self._failure("Error creating task: %s", CREATE_TASK_FAILED, created)

        task = created.value
        self._logger.info("Task created", extra={"task_id": task.id, "user_id": task.user_id})
        return Status.created(task)

    async def get_task(self, task_id: str) -> Status:
        """Return the task identified by ``task_id``."""
        found = await settle(self._tasks.get_task(task_id))
        if isinstance(found, Failed):
            return self._failure("Error fetching task: %s", FETCH_TASK_FAILED, found)
        if isinstance(found, NotFound):
            return Status.not_found(TASK_NOT_FOUND)
        return Status.ok(found.value)

    async def list_user_tasks(self, user_id: str, *, limit: int = 50, offset: int = 0) -> Status:
        """List the tasks of an existing user."""
        lookup = await settle(self._users.find_user(user_id))
        if isinstance(lookup, Failed):
            return self._failure("Error listing tasks: %s", LIST_TASKS_FAILED, lookup)
        if isinstance(lookup, NotFound):
            return Status.not_found(USER_NOT_FOUND)

        listed = await settle(self._tasks.list_tasks(user_id, limit=limit, offset=offset))
        if isinstance(listed, Failed):
            return self._failure("Error listing tasks: %s", LIST_TASKS_FAILED, listed)
        return Status.ok(listed.value)

    def _failure(self, label: str, message: str, failed: Failed) -> Status:
        self._logger.error(label, failed.error)
        return Status.failed(message, failed.error)


class UserService:
    """Registers users and looks them up."""

    def __init__(
        self,
        users: UserRepository | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._users = users or cast(UserRepository, inject.instance(UserRepository))
        self._logger = logger or logging.getLogger(__name__)

    async def register_user(self, request: RegisterUserRequest) -> Status:
        """Create a user unless the e-mail address is already registered."""
        if _is_blank(request.name):
            return Status.rejected(NAME_EMPTY)
        if _is_blank(request.email):
            return Status.rejected(EMAIL_EMPTY)

        name = cast(str, request.name)
        email = cast(str, request.email)

        existing = await settle(self._users.find_user_by_email(email))
        if isinstance(existing, Failed):
            return self._failure("Error creating user: %s", CREATE_USER_FAILED, existing)
        if not isinstance(existing, NotFound):
            return Status.rejected(EMAIL_TAKEN)

        created = await settle(self._users.create_user(NewUser(name=name, email=email)))
        if isinstance(created, Failed):
            return self._failure("Error creating user: %s", CREATE_USER_FAILED, created)

        self._logger.info("User registered", extra={"user_id": created.value.id})
        return Status.created(created.value)

    async def get_user(self, user_id: str) -> Status:
        """Return the user identified by ``user_id``."""
        found = await settle(self._users.find_user(user_id))
        if isinstance(found, Failed):
            return self._failure("Error fetching user: %s", FETCH_USER_FAILED, found)
        if isinstance(found, NotFound):
            return Status.not_found(USER_NOT_FOUND)
        return Status.ok(found.value)

    def _failure(self, label: str, message: str, failed: Failed) -> Status:
        self._logger.error(label, failed.error)
        return Status.failed(message, failed.error)
