from src.taskapi.domain.models.requests import CreateTaskRequest, RegisterUserRequest
from src.taskapi.domain.models.status import Status
from src.taskapi.domain.models.task import NewTask, Task
from src.taskapi.domain.models.user import NewUser, User

__all__ = [
    "Task",
    "NewTask",
    "User",
    "NewUser",
    "CreateTaskRequest",
    "RegisterUserRequest",
    "Status",
]
