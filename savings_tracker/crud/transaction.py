# savings_tracker/crud/transaction.py
import logging
import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from savings_tracker.core.db_utils import translate_db_errors
from savings_tracker.core.exceptions import InsufficientBalance, NotFound
from savings_tracker.core.locks import GoalLocks, goal_locks
from savings_tracker.crud.goal import get_goal_by_id, parse_id, require_user
from savings_tracker.models.transaction import Transaction
from savings_tracker.utils.balance import check_withdrawal, compute_balance
from savings_tracker.utils.money import to_money
from savings_tracker.utils.validation import WITHDRAWAL, ensure_valid, validate_transaction_input

logger = logging.getLogger(__name__)


@translate_db_errors
async def get_transactions_for_goal(goal_id, user_id: uuid.UUID, db: AsyncSession) -> List[Transaction]:
    """History of one goal in insertion order."""
    user_id = require_user(user_id)
    goal = await get_goal_by_id(goal_id, user_id, db)
    if goal is None:
        raise NotFound()
    return list(goal.transactions)


@translate_db_errors
async def append_transaction(
    user_id: uuid.UUID,
    goal_id,
    amount,
    tx_type: str,
    db: AsyncSession,
    locks: Optional[GoalLocks] = None,
) -> Transaction:
    """
    Record a deposit or withdrawal against one of the user's goals.

    This is the authoritative overdraft check: the balance is recomputed from
    the stored history while the goal is locked, and the new row is committed
    before the lock is released. A withdrawal larger than that balance raises
    InsufficientBalance and nothing is written.
    """
    user_id = require_user(user_id)
    ensure_valid(validate_transaction_input({"goal_id": goal_id, "amount": amount, "type": tx_type}))
    amount = to_money(amount)

    goal_uuid = parse_id(goal_id)
    if goal_uuid is None:
        raise NotFound()

    locks = locks if locks is not None else goal_locks
    async with locks.hold(goal_uuid):
        try:
            goal = await get_goal_by_id(goal_uuid, user_id, db, for_update=True)
            if goal is None:
                raise NotFound()

            history = list(goal.transactions)
            if tx_type == WITHDRAWAL:
                check_withdrawal(compute_balance(history), amount)

            new_tx = Transaction(
                id=uuid.uuid4(),
                amount=amount,
                type=tx_type,
                position=len(history),
                created_at=datetime.utcnow(),
            )
            # Through the relationship so the loaded history stays current
            goal.transactions.append(new_tx)
            await db.commit()
        except NotFound:
            # Nothing written; end the transaction to drop the row lock
            await db.commit()
            raise
        except InsufficientBalance as e:
            await db.commit()
            logger.info(
                f"Rejected withdrawal of {e.attempted} from goal {goal_uuid}: {e.available} available"
            )
            raise
        except Exception:
            await db.rollback()
            raise

    logger.info(f"Recorded {tx_type} of {amount} on goal {goal_uuid}")
    return new_tx


@translate_db_errors
async def check_transaction(user_id: uuid.UUID, goal_id, amount, tx_type: str, db: AsyncSession):
    """
    Advisory version of the append checks for pre-submit hints.

    Returns the goal's current balance. Raises the same errors an append
    would raise right now, but takes no lock and writes nothing, so a pass
    here does not guarantee the append will succeed.
    """
    user_id = require_user(user_id)
    ensure_valid(validate_transaction_input({"goal_id": goal_id, "amount": amount, "type": tx_type}))
    goal = await get_goal_by_id(goal_id, user_id, db)
    if goal is None:
        raise NotFound()
    current = compute_balance(goal.transactions)
    if tx_type == WITHDRAWAL:
        check_withdrawal(current, to_money(amount))
    return current
