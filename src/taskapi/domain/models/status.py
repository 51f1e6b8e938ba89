from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Status(BaseModel):
    """Outcome of a service call: success flag, HTTP-style code and payload."""

    success: bool = Field(description="Whether the operation succeeded.")
    code: int = Field(description="HTTP-style status code.")
    message: str | None = Field(default=None, description="Human readable outcome.")
    error: str | None = Field(default=None, description="Underlying error, 500 only.")
    data: Any | None = Field(default=None, description="Entity payload on success.")

    @classmethod
    def ok(cls, data: Any) -> Status:
        return cls(success=True, code=200, data=data)

    @classmethod
    def created(cls, data: Any) -> Status:
        return cls(success=True, code=201, data=data)

    @classmethod
    def rejected(cls, message: str) -> Status:
        return cls(success=False, code=400, message=message)

    @classmethod
    def not_found(cls, message: str) -> Status:
        return cls(success=False, code=404, message=message)

    @classmethod
    def failed(cls, message: str, error: BaseException | str) -> Status:
        return cls(success=False, code=500, message=message, error=str(error))

    def error_body(self) -> dict[str, str | None]:
        """JSON body for an unsuccessful outcome: ``message`` plus ``error`` on 500."""
        body: dict[str, str | None] = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body
