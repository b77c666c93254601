# savings_tracker/schemas/goal.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from decimal import Decimal
import uuid

from savings_tracker.schemas.money import Money
from savings_tracker.schemas.transaction import TransactionRead
from savings_tracker.utils.balance import summarize_goal, GoalsSummary
from savings_tracker.utils.money import format_currency

class GoalCreate(BaseModel):
    title: str = Field(..., description="1 to 100 characters")
    target: Decimal = Field(..., description="Target amount, at least 0.01")

class GoalRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    target: Money
    created_at: datetime
    transactions: List[TransactionRead]

    # Derived from the history on every read, never stored
    current: Money
    progress: Money
    is_completed: bool
    remaining: Money
    excess: Money

    @classmethod
    def from_goal(cls, goal) -> "GoalRead":
        progress = summarize_goal(goal.target, goal.transactions)
        return cls(
            id=goal.id,
            title=goal.title,
            target=goal.target,
            created_at=goal.created_at,
            transactions=[TransactionRead.model_validate(tx) for tx in goal.transactions],
            current=progress.current,
            progress=progress.progress,
            is_completed=progress.is_completed,
            remaining=progress.remaining,
            excess=progress.excess,
        )

class GoalsSummaryRead(BaseModel):
    total_goals: int
    completed_goals: int
    total_saved: Money
    total_saved_display: str

    @classmethod
    def from_summary(cls, summary: GoalsSummary) -> "GoalsSummaryRead":
        return cls(
            total_goals=summary.total_goals,
            completed_goals=summary.completed_goals,
            total_saved=summary.total_saved,
            total_saved_display=format_currency(summary.total_saved),
        )
