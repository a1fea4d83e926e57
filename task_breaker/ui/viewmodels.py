"""
View-model helpers for the goal page.
What it computes:
- Progress of a goal (completed / total steps)
- Overdue and urgent flags of a step

And, the main purpose:
Keep the display rules in Python so the template only lays them out.
"""


from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List

from task_breaker.db.models import Goal, Step

URGENT_WITHIN_DAYS = 3


def progress_percent(steps: Iterable[Step]) -> float:
    steps = list(steps)
    if not steps:
        return 0.0
    done = sum(1 for s in steps if s.is_completed)
    return done / len(steps) * 100


def is_overdue(deadline: date, completed: bool, today: date) -> bool:
    return not completed and deadline < today


def is_urgent(deadline: date, completed: bool, today: date) -> bool:
    if completed or is_overdue(deadline, completed, today):
        return False
    return (deadline - today).days <= URGENT_WITHIN_DAYS


def format_day(d: date) -> str:
    return d.strftime("%Y/%m/%d")


@dataclass
class StepView:
    id: str
    title: str
    deadline: str
    completed: bool
    overdue: bool
    urgent: bool

@dataclass
class GoalCard:
    id: str
    title: str
    deadline: str
    progress: int
    completed_steps: int
    total_steps: int
    steps: List[StepView] = field(default_factory=list)


def step_view(step: Step, today: date) -> StepView:
    return StepView(
        id=step.id,
        title=step.title,
        deadline=format_day(step.deadline),
        completed=step.is_completed,
        overdue=is_overdue(step.deadline, step.is_completed, today),
        urgent=is_urgent(step.deadline, step.is_completed, today),
    )


def goal_card(goal: Goal, today: date) -> GoalCard:
    steps = list(goal.steps)
    return GoalCard(
        id=goal.id,
        title=goal.title,
        deadline=format_day(goal.deadline),
        progress=round(progress_percent(steps)),
        completed_steps=sum(1 for s in steps if s.is_completed),
        total_steps=len(steps),
        steps=[step_view(s, today) for s in steps],
    )
