from pydantic import BaseModel, ConfigDict, Field


class CreateTaskRequest(BaseModel):
    title: str | None = Field(
        default=None,
        description="Task title; a missing or blank title is rejected with 400.",
    )
    description: str | None = Field(default=None, description="Optional task details.")
    user_id: str = Field(alias="userId", description="Identifier of an existing user.")

    model_config = ConfigDict(populate_by_name=True)


class RegisterUserRequest(BaseModel):
    name: str | None = Field(default=None, description="Display name; must not be blank.")
    email: str | None = Field(default=None, description="E-mail address; must be unique.")
