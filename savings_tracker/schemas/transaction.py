# savings_tracker/schemas/transaction.py
from typing import Dict, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from decimal import Decimal
import uuid

from savings_tracker.schemas.money import Money

class TransactionCreate(BaseModel):
    # Kept as a plain string so an empty id reaches the validator.
    # Errors are reported under the first choice, goal_id.
    goal_id: str = Field(
        ...,
        validation_alias=AliasChoices("goal_id", "goalId"),
        description="Goal the transaction is recorded against",
    )
    amount: Decimal = Field(..., description="Positive amount, at least 0.01")
    type: str = Field(..., description="deposit or withdrawal")

class TransactionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    goal_id: uuid.UUID
    amount: Money
    type: str
    position: int
    created_at: datetime

class TransactionCheckResult(BaseModel):
    """Advisory pre-submit answer; the append itself re-checks."""
    ok: bool
    available: Optional[Money] = None
    errors: Dict[str, str] = {}
