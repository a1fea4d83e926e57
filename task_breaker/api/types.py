"""
API request and response schemas.
What it defines:
- Input payloads
- Response formats (camelCase keys, as the browser client expects)

And, the main purpose:
Ensure structured communication between client and server.
"""


from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class GenerateGoalRequest(_CamelModel):
    # optional so that a missing field is our 400, not a schema error
    title: Optional[str] = None
    deadline: Optional[str] = None
    description: Optional[str] = None

class UpdateStepRequest(_CamelModel):
    is_completed: Optional[bool] = None
    title: Optional[str] = None


class StepOut(_CamelModel):
    id: str
    goal_id: str
    title: str
    deadline: date
    is_completed: bool

class GoalOut(_CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    deadline: date
    user_id: Optional[str] = None
    created_at: datetime
    steps: List[StepOut] = []
