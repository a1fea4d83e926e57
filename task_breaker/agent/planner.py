"""
Creates the step plan for a goal.
What it does:
- Fills the decomposition prompt with the goal title, deadline and today
- Calls the model once (no retry)
- Strips code fences and parses the JSON answer
- Validates every step and clamps step deadlines to the goal deadline

And, the main purpose:
Convert a goal into dated, ordered steps.
"""



from datetime import date
from typing import Any, List

from pydantic import ValidationError

from task_breaker.core.config import settings
from task_breaker.core.logging import get_logger
from task_breaker.llm.router import generate_text
from task_breaker.llm.prompts import DECOMPOSE_PROMPT
from task_breaker.llm.json_parse import extract_json_array
from task_breaker.llm.schemas import StepDraft

log = get_logger("agent.planner")

MIN_STEPS = 5


class DecompositionError(ValueError):
    """The model answered, but not with a usable list of steps."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


def build_prompt(title: str, deadline: date, today: date) -> str:
    return DECOMPOSE_PROMPT.format(
        title=title,
        deadline=deadline.isoformat(),
        today=today.isoformat(),
        min_steps=MIN_STEPS,
        max_steps=settings.MAX_STEPS,
    )


def parse_steps(text: str, goal_deadline: date) -> List[StepDraft]:
    try:
        data: Any = extract_json_array(text)
    except ValueError as e:
        raise DecompositionError(f"not JSON: {e}", raw=text)

    if not isinstance(data, list):
        raise DecompositionError(f"expected a JSON array, got {type(data).__name__}", raw=text)
    if not data:
        raise DecompositionError("model returned no steps", raw=text)

    try:
        steps = [StepDraft.model_validate(item) for item in data]
    except ValidationError as e:
        raise DecompositionError(f"invalid step: {e.errors()[0]['msg']}", raw=text)

    if len(steps) < MIN_STEPS:
        raise DecompositionError(f"model returned {len(steps)} steps, need at least {MIN_STEPS}", raw=text)
    if len(steps) > settings.MAX_STEPS:
        log.warning(f"model returned {len(steps)} steps, keeping the first {settings.MAX_STEPS}")
        steps = steps[: settings.MAX_STEPS]

    for s in steps:
        if s.deadline > goal_deadline:
            s.deadline = goal_deadline
    return steps


async def make_plan(*, title: str, deadline: date, today: date) -> List[StepDraft]:
    text = await generate_text(build_prompt(title, deadline, today))
    return parse_steps(text, deadline)
