# savings_tracker/crud/goal.py
import logging
import uuid
from datetime import datetime
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from savings_tracker.core.db_utils import translate_db_errors
from savings_tracker.core.exceptions import NotFound, Unauthorized
from savings_tracker.models.goal import SavingsGoal
from savings_tracker.models.transaction import Transaction  # noqa: F401  (mapper registry)
from savings_tracker.utils.money import to_money
from savings_tracker.utils.validation import ensure_valid, validate_goal_input

logger = logging.getLogger(__name__)

IdLike = Union[uuid.UUID, str]


def require_user(user_id: Optional[uuid.UUID]) -> uuid.UUID:
    """Every goal operation runs on behalf of an authenticated user."""
    if user_id is None:
        raise Unauthorized()
    return user_id


def parse_id(value: IdLike) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


@translate_db_errors
async def list_goals(user_id: uuid.UUID, db: AsyncSession) -> List[SavingsGoal]:
    """All goals owned by the user, oldest first, each with its full history."""
    user_id = require_user(user_id)
    result = await db.execute(
        select(SavingsGoal)
        .where(SavingsGoal.user_id == user_id)
        .options(selectinload(SavingsGoal.transactions))
        .order_by(SavingsGoal.created_at)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def get_goal_by_id(
    goal_id: IdLike,
    user_id: uuid.UUID,
    db: AsyncSession,
    for_update: bool = False,
) -> Optional[SavingsGoal]:
    goal_uuid = parse_id(goal_id)
    if goal_uuid is None:
        return None
    stmt = (
        select(SavingsGoal)
        .where(SavingsGoal.id == goal_uuid, SavingsGoal.user_id == user_id)
        .options(selectinload(SavingsGoal.transactions))
        # Re-read the history even when the goal is already in the session
        .execution_options(populate_existing=True)
    )
    if for_update:
        # Row lock on the goal; the history is re-read under it
        stmt = stmt.with_for_update(of=SavingsGoal)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


@translate_db_errors
async def get_goal(goal_id: IdLike, user_id: uuid.UUID, db: AsyncSession) -> SavingsGoal:
    """Goal owned by the user, or NotFound. Foreign goals look exactly like missing ones."""
    user_id = require_user(user_id)
    goal = await get_goal_by_id(goal_id, user_id, db)
    if goal is None:
        raise NotFound()
    return goal


@translate_db_errors
async def create_goal(user_id: uuid.UUID, title: str, target, db: AsyncSession) -> SavingsGoal:
    user_id = require_user(user_id)
    ensure_valid(validate_goal_input({"title": title, "target": target}))

    new_goal = SavingsGoal(
        id=uuid.uuid4(),
        user_id=user_id,
        title=title,
        target=to_money(target),
        created_at=datetime.utcnow(),
    )
    # A new goal starts with an empty history
    new_goal.transactions = []
    db.add(new_goal)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info(f"Created goal {new_goal.id} for user {user_id}")
    return new_goal
