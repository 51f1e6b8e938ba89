from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    id: str = Field(description="Unique task identifier.")
    title: str = Field(description="Task title, stored as supplied.")
    description: str | None = Field(default=None, description="Optional details.")
    user_id: str = Field(alias="userId", description="Identifier of the owning user.")
    completed: bool = Field(default=False, description="Completion flag.")

    model_config = ConfigDict(populate_by_name=True)


class NewTask(BaseModel):
    """Fields required to insert a task row; the store applies id and defaults."""

    title: str
    description: str | None = None
    user_id: str
