from __future__ import annotations

from src.taskapi.domain.models.task import NewTask, Task
from src.taskapi.domain.models.user import NewUser, User
from src.taskapi.infrastructure.postgres.orm import TaskRow, UserRow


class OrmMapper:
    @staticmethod
    def to_user_row(user: NewUser) -> UserRow:
        return UserRow(name=user.name, email=user.email)

    @staticmethod
    def to_task_row(task: NewTask) -> TaskRow:
        return TaskRow(
            title=task.title,
            description=task.description,
            user_id=task.user_id,
        )

    @staticmethod
    def to_domain_user(row: UserRow) -> User:
        return User(id=row.id, name=row.name, email=row.email)

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            title=row.title,
            description=row.description,
            user_id=row.user_id,
            # Unflushed rows have no default applied yet.
            completed=bool(row.completed),
        )
