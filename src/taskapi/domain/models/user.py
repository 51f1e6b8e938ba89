from pydantic import BaseModel, Field


class User(BaseModel):
    id: str = Field(description="Unique user identifier.")
    name: str = Field(description="Display name.")
    email: str = Field(description="Unique e-mail address.")


class NewUser(BaseModel):
    """Fields required to insert a user row; the store generates the id."""

    name: str
    email: str
