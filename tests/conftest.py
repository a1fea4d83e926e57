import asyncio
import os
import tempfile
from datetime import date, datetime
from typing import Optional

# Must be set before task_breaker.core.config is imported.
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{tempfile.gettempdir()}/task_breaker_pytest.db"
os.environ["LLM_PROVIDER"] = "mock"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from task_breaker.core.ids import new_id
from task_breaker.db.base import Base
from task_breaker.db.models import Goal, Step
from task_breaker.db.session import get_db
from task_breaker.main import app

ALICE = {"X-User-Id": "alice"}
BOB = {"X-User-Id": "bob"}


@pytest.fixture
def session_factory(tmp_path):
    # NullPool: no connection outlives the event loop that opened it
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create())
    yield async_sessionmaker(engine, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def db_call(session_factory):
    """Runs `fn(db)` against the test database and returns its result."""

    def _call(fn):
        async def _run():
            async with session_factory() as db:
                return await fn(db)

        return asyncio.run(_run())

    return _call


def _override(session_factory):
    async def _get_db():
        async with session_factory() as db:
            yield db

    return _get_db


@pytest.fixture
def client(session_factory):
    app.dependency_overrides[get_db] = _override(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(session_factory):
    """Client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_db] = _override(session_factory)
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_goal(db_call):
    def _seed(
        user_id: Optional[str] = "alice",
        title: str = "Run a marathon",
        deadline: date = date(2030, 6, 1),
        steps: Optional[list] = None,
        created_at: Optional[datetime] = None,
    ) -> Goal:
        goal_id = new_id("goal")
        goal = Goal(
            id=goal_id,
            title=title,
            deadline=deadline,
            user_id=user_id,
            created_at=created_at or datetime.utcnow(),
            steps=[
                Step(id=new_id("step"), goal_id=goal_id, idx=i, title=t, deadline=d, is_completed=done)
                for i, (t, d, done) in enumerate(steps or [])
            ],
        )

        async def _add(db):
            db.add(goal)
            await db.commit()
            return goal

        return db_call(_add)

    return _seed
