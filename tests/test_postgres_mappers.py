from src.taskapi.domain.models import NewTask, NewUser, Task, User
from src.taskapi.infrastructure.postgres.mappers import OrmMapper
from src.taskapi.infrastructure.postgres.orm import TaskRow, UserRow


def test_task_row_keeps_title_as_supplied() -> None:
    row = OrmMapper.to_task_row(NewTask(title="  Spaced  ", description=None, user_id="user-1"))

    assert row.title == "  Spaced  "
    assert row.description is None
    assert row.user_id == "user-1"


def test_to_domain_task_uses_camel_case_alias() -> None:
    row = TaskRow(id="task-1", title="Title", description="Body", user_id="user-1", completed=False)

    task = OrmMapper.to_domain_task(row)

    assert task == Task(id="task-1", title="Title", description="Body", user_id="user-1")
    assert task.model_dump(by_alias=True)["userId"] == "user-1"


def test_to_domain_task_defaults_completed_before_flush() -> None:
    row = TaskRow(id="task-2", title="Fresh", user_id="user-1")

    assert OrmMapper.to_domain_task(row).completed is False


def test_user_round_trip_through_row() -> None:
    row = OrmMapper.to_user_row(NewUser(name="Test User", email="test@example.com"))
    row.id = "user-1"

    assert OrmMapper.to_domain_user(row) == User(
        id="user-1", name="Test User", email="test@example.com"
    )


def test_task_table_references_users() -> None:
    foreign_keys = {fk.target_fullname for fk in TaskRow.__table__.c.user_id.foreign_keys}

    assert foreign_keys == {"users.id"}
    assert UserRow.__table__.c.email.unique is True
