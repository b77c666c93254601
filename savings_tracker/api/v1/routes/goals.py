# savings_tracker/api/v1/routes/goals.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from savings_tracker.schemas.goal import GoalCreate, GoalRead, GoalsSummaryRead
from savings_tracker.schemas.transaction import TransactionRead
from savings_tracker.crud.goal import list_goals, get_goal, create_goal
from savings_tracker.crud.transaction import get_transactions_for_goal
from savings_tracker.utils.balance import summarize_goals
from savings_tracker.core.database import get_async_session
from savings_tracker.core.auth import User
from savings_tracker.api.deps import get_current_user

router = APIRouter(prefix="/goals", tags=["Goals"])

@router.get("", response_model=List[GoalRead])
async def read_goals(
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    """
    List the caller's savings goals with their transaction history.

    Each goal carries the values derived from its history:
    - **current**: deposits minus withdrawals
    - **progress**: percentage of target reached, capped at 100
    - **is_completed**: progress reached 100
    - **remaining** / **excess**: distance below / beyond the target
    """
    goals = await list_goals(user.id, db)
    return [GoalRead.from_goal(goal) for goal in goals]

@router.post("", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
async def create_goal_endpoint(
    goal_in: GoalCreate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    goal = await create_goal(user.id, goal_in.title, goal_in.target, db)
    return GoalRead.from_goal(goal)

@router.get("/summary", response_model=GoalsSummaryRead)
async def read_goals_summary(
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    """Dashboard totals: number of goals, goals reached and total saved."""
    goals = await list_goals(user.id, db)
    return GoalsSummaryRead.from_summary(summarize_goals(goals))

@router.get("/{goal_id}", response_model=GoalRead)
async def read_goal(
    goal_id: str,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    goal = await get_goal(goal_id, user.id, db)
    return GoalRead.from_goal(goal)

@router.get("/{goal_id}/transactions", response_model=List[TransactionRead])
async def read_goal_transactions(
    goal_id: str,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    """Transaction history of one goal, oldest first."""
    return await get_transactions_for_goal(goal_id, user.id, db)
