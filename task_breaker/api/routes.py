from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from task_breaker.core.auth import current_user_id, require_user_id
from task_breaker.core.dates import parse_day, today
from task_breaker.core.ids import new_id
from task_breaker.core.logging import get_logger
from task_breaker.db.session import get_db
from task_breaker.db.models import Goal, Step
from task_breaker.db.repo import create_goal, get_goal, list_goals, delete_goal, get_step, update_step
from task_breaker.agent.planner import make_plan, DecompositionError
from task_breaker.api.types import GenerateGoalRequest, UpdateStepRequest, GoalOut, StepOut


"""
FastAPI routes for goals and steps.
What it provides:
- List the caller's goals
- Create a goal by AI decomposition
- Delete a goal
- Update a step (completion / title)

And, the main purpose:
Expose goal tracking over HTTP.
"""

log = get_logger("api.routes")

router = APIRouter()


@router.get("/goals", response_model=List[GoalOut])
async def api_list_goals(
    user_id: Optional[str] = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
):
    if not user_id:
        return []
    goals = await list_goals(db, user_id)
    return [GoalOut.model_validate(g) for g in goals]


@router.post("/goals/generate", response_model=GoalOut)
async def api_generate_goal(
    req: GenerateGoalRequest,
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    title = (req.title or "").strip()
    if not title or not req.deadline:
        raise HTTPException(400, "Title and deadline are required")

    try:
        target = parse_day(req.deadline)
    except ValueError:
        raise HTTPException(400, "Invalid deadline")

    now = today()
    if target < now:
        raise HTTPException(400, "Deadline must be in the future")

    try:
        drafts = await make_plan(title=title, deadline=target, today=now)
    except DecompositionError as e:
        log.error(f"Failed to parse model response ({e}): {e.raw!r}")
        raise HTTPException(500, "Failed to generate valid steps")

    goal_id = new_id("goal")
    goal = Goal(
        id=goal_id,
        title=title,
        description=req.description,
        deadline=target,
        user_id=user_id,
        steps=[
            Step(id=new_id("step"), goal_id=goal_id, idx=idx, title=d.title, deadline=d.deadline, is_completed=False)
            for idx, d in enumerate(drafts)
        ],
    )
    goal = await create_goal(db, goal)
    log.info(f"created goal {goal.id} with {len(goal.steps)} steps for user {user_id}")
    return GoalOut.model_validate(goal)


@router.delete("/goals/{goal_id}")
async def api_delete_goal(
    goal_id: str,
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    goal = await get_goal(db, goal_id)
    if not goal:
        raise HTTPException(404, "Goal not found")
    # goals without an owner are open to any signed-in user
    if goal.user_id and goal.user_id != user_id:
        raise HTTPException(403, "Forbidden")

    await delete_goal(db, goal)
    return {"success": True}


@router.patch("/steps/{step_id}", response_model=StepOut)
async def api_update_step(
    step_id: str,
    req: UpdateStepRequest,
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    step = await get_step(db, step_id)
    if not step:
        raise HTTPException(404, "Step not found")
    if step.goal.user_id and step.goal.user_id != user_id:
        raise HTTPException(403, "Forbidden")

    changes = {}
    if req.is_completed is not None:
        changes["is_completed"] = req.is_completed
    if req.title is not None:
        title = req.title.strip()
        if not title:
            raise HTTPException(400, "Title must not be empty")
        changes["title"] = title
    if not changes:
        raise HTTPException(400, "Nothing to update")

    step = await update_step(db, step, changes)
    return StepOut.model_validate(step)
