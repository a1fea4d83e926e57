from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from task_breaker.core.dates import parse_date

class StepDraft(BaseModel):
    title: str = Field(..., min_length=1, description="One actionable step")
    deadline: date

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("deadline", mode="before")
    @classmethod
    def date_part(cls, value: Any) -> Any:
        # models sometimes answer with a full timestamp
        if isinstance(value, str):
            return parse_date(value)
        return value
