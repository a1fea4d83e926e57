from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from task_breaker.core.auth import current_user_id
from task_breaker.core.dates import today
from task_breaker.db.repo import list_goals
from task_breaker.db.session import get_db
from task_breaker.ui.viewmodels import goal_card

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    user_id: Optional[str] = Depends(current_user_id),
    db: AsyncSession = Depends(get_db),
):
    now = today()
    goals = await list_goals(db, user_id) if user_id else []
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "signed_in": bool(user_id),
            "user_id": user_id,
            "cards": [goal_card(g, now) for g in goals],
            "min_deadline": now.isoformat(),
        },
    )
