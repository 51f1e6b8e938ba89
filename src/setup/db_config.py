from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

ASYNC_DRIVER_SCHEME = "postgresql+asyncpg://"


class DatabaseSettings(BaseSettings):
    DATABASE_URL: str
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 5

    model_config = ConfigDict(env_file=".env", extra="ignore")

    @field_validator("DATABASE_URL")
    @classmethod
    def _use_async_driver(cls, value: str) -> str:
        """Plain ``postgres://`` URLs (as issued by most hosts) get the asyncpg driver."""
        for scheme in ("postgresql://", "postgres://"):
            if value.startswith(scheme):
                return ASYNC_DRIVER_SCHEME + value[len(scheme) :]
        return value


def get_database_settings() -> DatabaseSettings:
    return DatabaseSettings()  # type: ignore[call-arg]
