"""Base model and database setup."""
from datetime import datetime

from sqlalchemy import MetaData, DateTime, func
from sqlalchemy.ext.asyncio import AsyncAttrs, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.engine.url import make_url

from app.config import get_settings

settings = get_settings()

# Naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all models."""

    metadata = MetaData(naming_convention=convention)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


# Database engine and session
def build_engine_params(database_url: str) -> tuple[str, dict, dict]:
    """Normalize driver URL options and return (url, connect_args, engine_kwargs)."""
    url = make_url(database_url)
    query = dict(url.query)
    connect_args: dict = {}
    engine_kwargs: dict = {}

    if url.get_backend_name() == "sqlite":
        return url.render_as_string(hide_password=False), connect_args, engine_kwargs

    sslmode = query.pop("sslmode", None)
    if sslmode and sslmode.lower() != "disable":
        connect_args["ssl"] = True

    # libpq-only options; asyncpg does not accept these as kwargs
    query.pop("channel_binding", None)

    engine_kwargs.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
    return (
        url.set(query=query).render_as_string(hide_password=False),
        connect_args,
        engine_kwargs,
    )


database_url, database_connect_args, database_engine_kwargs = build_engine_params(
    settings.database_url
)
engine = create_async_engine(
    database_url,
    echo=settings.database_echo,
    connect_args=database_connect_args,
    **database_engine_kwargs,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db():
    """Dependency to get database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """Initialize database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
