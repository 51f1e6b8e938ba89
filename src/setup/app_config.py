import inject

from src.setup.db_config import DatabaseSettings, get_database_settings
from src.taskapi.domain.repositories import TaskRepository, UserRepository
from src.taskapi.infrastructure.postgres.orm import PostgresOrm
from src.taskapi.infrastructure.postgres.repositories import (
    PostgresTaskRepository,
    PostgresUserRepository,
)


def build_binder_config(settings: DatabaseSettings):
    """Return an ``inject`` config binding the Postgres repositories."""
    orm = PostgresOrm.from_settings(settings)

    def _config(binder: inject.Binder) -> None:
        binder.bind(PostgresOrm, orm)
        binder.bind(UserRepository, PostgresUserRepository(orm))
        binder.bind(TaskRepository, PostgresTaskRepository(orm))

    return _config


def configure_di(settings: DatabaseSettings | None = None) -> None:
    """Configure the DI container once per process."""
    if inject.is_configured():
        return
    if settings is None:
        settings = get_database_settings()
    inject.configure(build_binder_config(settings), once=True)
