# savings_tracker/api/v1/routes/transactions.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from savings_tracker.schemas.transaction import (
    TransactionCreate,
    TransactionRead,
    TransactionCheckResult,
)
from savings_tracker.crud.transaction import append_transaction, check_transaction
from savings_tracker.core.database import get_async_session
from savings_tracker.core.auth import User
from savings_tracker.core.exceptions import InsufficientBalance, ValidationError
from savings_tracker.api.deps import get_current_user

router = APIRouter(prefix="/transactions", tags=["Transactions"])

@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    tx_in: TransactionCreate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    """
    Append a deposit or withdrawal to one of the caller's goals.

    Withdrawals larger than the goal's balance are rejected with 409 and an
    error on the **amount** field; the goal is left unchanged.
    """
    return await append_transaction(user.id, tx_in.goal_id, tx_in.amount, tx_in.type, db)

@router.post("/check", response_model=TransactionCheckResult)
async def check_transaction_endpoint(
    tx_in: TransactionCreate,
    db: AsyncSession = Depends(get_async_session),
    user: User = Depends(get_current_user),
):
    """
    Pre-submit hint for transaction forms. Nothing is recorded.

    The answer reflects the balance at the time of the check only; the
    append endpoint performs the binding check.
    """
    try:
        available = await check_transaction(user.id, tx_in.goal_id, tx_in.amount, tx_in.type, db)
    except InsufficientBalance as e:
        return TransactionCheckResult(ok=False, available=e.available, errors=e.errors)
    except ValidationError as e:
        return TransactionCheckResult(ok=False, errors=e.errors)
    return TransactionCheckResult(ok=True, available=available)
