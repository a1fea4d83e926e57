# task_breaker/db/repo.py

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from task_breaker.db.models import Goal, Step


async def create_goal(db: AsyncSession, goal: Goal) -> Goal:
    """
    Inserts the goal together with its steps in a single commit.

    Returns the goal re-read from the database so ``goal.steps`` comes
    back in deadline order rather than insertion order.
    """
    db.add(goal)
    await db.commit()
    return await get_goal(db, goal.id, refresh=True)


async def get_goal(db: AsyncSession, goal_id: str, *, refresh: bool = False) -> Goal | None:
    stmt = select(Goal).where(Goal.id == goal_id)
    if refresh:
        stmt = stmt.execution_options(populate_existing=True)
    res = await db.execute(stmt)
    return res.scalar_one_or_none()


async def list_goals(db: AsyncSession, user_id: str) -> list[Goal]:
    res = await db.execute(
        select(Goal).where(Goal.user_id == user_id).order_by(Goal.created_at.desc())
    )
    return list(res.scalars().all())


async def delete_goal(db: AsyncSession, goal: Goal) -> None:
    await db.delete(goal)
    await db.commit()


async def get_step(db: AsyncSession, step_id: str) -> Step | None:
    res = await db.execute(
        select(Step).where(Step.id == step_id).options(selectinload(Step.goal))
    )
    return res.scalar_one_or_none()


async def update_step(db: AsyncSession, step: Step, changes: dict[str, Any]) -> Step:
    # Only the keys present in `changes` are written
    for field, value in changes.items():
        setattr(step, field, value)
    db.add(step)
    await db.commit()
    await db.refresh(step)
    return step
