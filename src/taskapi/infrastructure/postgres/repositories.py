from __future__ import annotations

from sqlalchemy import select

from src.taskapi.domain.models.task import NewTask, Task
from src.taskapi.domain.models.user import NewUser, User
from src.taskapi.domain.repositories import TaskRepository, UserRepository
from src.taskapi.domain.results import Failed, NotFound, Ok, settle
from src.taskapi.infrastructure.postgres.mappers import OrmMapper
from src.taskapi.infrastructure.postgres.orm import PostgresOrm, TaskRow, UserRow


class PostgresUserRepository(UserRepository):
    """Postgres-backed user storage using SQLAlchemy async sessions."""

    def __init__(self, orm: PostgresOrm) -> None:
        self._orm = orm

    async def find_user(self, user_id: str) -> Ok[User] | NotFound | Failed:
        return await settle(self._find_user(user_id))

    async def find_user_by_email(self, email: str) -> Ok[User] | NotFound | Failed:
        return await settle(self._find_user_by_email(email))

    async def create_user(self, user: NewUser) -> Ok[User] | Failed:
        return await settle(self._create_user(user))

    async def _find_user(self, user_id: str) -> Ok[User] | NotFound:
        async with self._orm.session_factory() as session:
            user_row = await session.get(UserRow, user_id)
        if user_row is None:
            return NotFound(user_id)
        return Ok(OrmMapper.to_domain_user(user_row))

    async def _find_user_by_email(self, email: str) -> Ok[User] | NotFound:
        async with self._orm.session_factory() as session:
            result = await session.execute(select(UserRow).where(UserRow.email == email))
            user_row = result.scalar_one_or_none()
        if user_row is None:
            return NotFound(email)
        return Ok(OrmMapper.to_domain_user(user_row))

    async def _create_user(self, user: NewUser) -> Ok[User]:
        user_row = OrmMapper.to_user_row(user)
        async with self._orm.session_factory() as session:
            async with session.begin():
                session.add(user_row)
        return Ok(OrmMapper.to_domain_user(user_row))


class PostgresTaskRepository(TaskRepository):
    """Postgres-backed task storage using SQLAlchemy async sessions."""

    def __init__(self, orm: PostgresOrm) -> None:
        self._orm = orm

    async def create_task(self, task: NewTask) -> Ok[Task] | Failed:
        """Insert a task; a dangling ``user_id`` fails on the foreign key."""
        return await settle(self._create_task(task))

    async def get_task(self, task_id: str) -> Ok[Task] | NotFound | Failed:
        return await settle(self._get_task(task_id))

    async def list_tasks(
        self,
        user_id: str,
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> Ok[list[Task]] | Failed:
        return await settle(self._list_tasks(user_id, limit=limit, offset=offset))

    async def _create_task(self, task: NewTask) -> Ok[Task]:
        task_row = OrmMapper.to_task_row(task)
        async with self._orm.session_factory() as session:
            async with session.begin():
                session.add(task_row)
        return Ok(OrmMapper.to_domain_task(task_row))

    async def _get_task(self, task_id: str) -> Ok[Task] | NotFound:
        async with self._orm.session_factory() as session:
            task_row = await session.get(TaskRow, task_id)
        if task_row is None:
            return NotFound(task_id)
        return Ok(OrmMapper.to_domain_task(task_row))

    async def _list_tasks(self, user_id: str, *, limit: int, offset: int) -> Ok[list[Task]]:
        statement = (
            select(TaskRow)
            .where(TaskRow.user_id == user_id)
            .order_by(TaskRow.id)
            .limit(limit)
            .offset(offset)
        )
        async with self._orm.session_factory() as session:
            result = await session.execute(statement)
            rows = result.scalars().all()
        return Ok([OrmMapper.to_domain_task(row) for row in rows])
