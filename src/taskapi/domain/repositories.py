from __future__ import annotations

from typing import Protocol

from src.taskapi.domain.models.task import NewTask, Task
from src.taskapi.domain.models.user import NewUser, User
from src.taskapi.domain.results import Failed, NotFound, Ok


class UserRepository(Protocol):
    """Repository contract for user lookups and registration."""

    async def find_user(self, user_id: str) -> Ok[User] | NotFound | Failed:
        """Look up a user by identifier."""

    async def find_user_by_email(self, email: str) -> Ok[User] | NotFound | Failed:
        """Look up a user by e-mail address."""

    async def create_user(self, user: NewUser) -> Ok[User] | Failed:
        """Insert a user and return the stored record."""


class TaskRepository(Protocol):
    """Repository contract for task persistence."""

    async def create_task(self, task: NewTask) -> Ok[Task] | Failed:
        """Insert a task and return the stored record, defaults included."""

    async def get_task(self, task_id: str) -> Ok[Task] | NotFound | Failed:
        """Fetch a task by identifier."""

    async def list_tasks(
        self,
        user_id: str,
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> Ok[list[Task]] | Failed:
        """List tasks owned by ``user_id`` ordered by id."""
