from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from task_breaker.core.config import settings
from task_breaker.db.base import Base
from task_breaker.db import models  # noqa: F401

engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False)

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def get_db() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as db:
        yield db
