from __future__ import annotations

from uuid import uuid4

from sqlalchemy import Boolean, ForeignKey, String, Text, false
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from src.setup.db_config import DatabaseSettings


def _new_id() -> str:
    return str(uuid4())


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)

    tasks: Mapped[list["TaskRow"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


class TaskRow(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Python-side default keeps the value loaded after flush; the server
    # default covers rows inserted outside the ORM.
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    user: Mapped[UserRow] = relationship(back_populates="tasks")


class PostgresOrm:
    """Process-wide async engine plus the session factory the repositories draw from."""

    def __init__(self, database_url: str, *, echo: bool = False, pool_size: int = 5) -> None:
        engine = create_async_engine(
            database_url,
            echo=echo,
            pool_size=pool_size,
            pool_pre_ping=True,
        )
        self._engine: AsyncEngine = engine
        self._sessions: async_sessionmaker[AsyncSession] = async_sessionmaker(
            engine, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings) -> PostgresOrm:
        return cls(
            settings.DATABASE_URL,
            echo=settings.DATABASE_ECHO,
            pool_size=settings.DATABASE_POOL_SIZE,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        # Rows outlive their session; expire_on_commit=False keeps them readable.
        return self._sessions

    async def dispose(self) -> None:
        await self._engine.dispose()
