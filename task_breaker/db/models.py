"""
Database table definitions and it stores:
- Goals (one per user objective)
- Steps (AI-generated sub-tasks of a goal)
Main purpose:
Define persistent data structure.
"""



from datetime import date, datetime
from typing import Optional

from sqlalchemy import String, Text, Integer, Date, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from task_breaker.db.base import Base

class Goal(Base):
    __tablename__ = "goals"
    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(Text)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    deadline: Mapped[date] = mapped_column(Date)
    # nullable: rows created before sign-in existed have no owner
    user_id: Mapped[Optional[str]] = mapped_column(String, index=True, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    steps: Mapped[list["Step"]] = relationship(
        "Step",
        back_populates="goal",
        cascade="all, delete-orphan",
        order_by="[Step.deadline, Step.idx]",
        lazy="selectin",
    )

class Step(Base):
    __tablename__ = "steps"
    id: Mapped[str] = mapped_column(String, primary_key=True)
    goal_id: Mapped[str] = mapped_column(String, ForeignKey("goals.id", ondelete="CASCADE"), index=True)
    idx: Mapped[int] = mapped_column(Integer, default=0)  # position in the model's answer
    title: Mapped[str] = mapped_column(Text)
    deadline: Mapped[date] = mapped_column(Date)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False)

    goal: Mapped["Goal"] = relationship("Goal", back_populates="steps")
Index("ix_steps_goal_deadline", Step.goal_id, Step.deadline)
