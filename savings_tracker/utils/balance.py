# savings_tracker/utils/balance.py
"""
Balance model for savings goals.

A goal stores only its target and its transaction history; the balance,
progress and completion state are always derived from that history. These
functions are pure so the goal service (authoritative, at append time) and
the API responses (display) derive the same numbers.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence, Tuple

from savings_tracker.core.exceptions import InsufficientBalance
from savings_tracker.utils.validation import DEPOSIT, WITHDRAWAL

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _dec(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


@dataclass(frozen=True)
class GoalProgress:
    current: Decimal
    progress: Decimal
    is_completed: bool
    remaining: Decimal
    excess: Decimal


@dataclass(frozen=True)
class GoalsSummary:
    total_goals: int
    completed_goals: int
    total_saved: Decimal


def compute_balance(transactions: Iterable) -> Decimal:
    """Fold the history in order: deposits add, withdrawals subtract."""
    current = ZERO
    for tx in transactions:
        if tx.type == DEPOSIT:
            current += _dec(tx.amount)
        elif tx.type == WITHDRAWAL:
            current -= _dec(tx.amount)
        else:
            raise ValueError(f"Unknown transaction type: {tx.type!r}")
    return current


def compute_progress(current: Decimal, target: Decimal) -> Decimal:
    """Percentage of target reached, clamped to [0, 100]. target must be > 0."""
    if current <= ZERO:
        return ZERO
    return min(_dec(current) / _dec(target) * HUNDRED, HUNDRED)


def is_completed(current: Decimal, target: Decimal) -> bool:
    return compute_progress(current, target) >= HUNDRED


def compute_remaining(current: Decimal, target: Decimal) -> Tuple[Decimal, Decimal]:
    """Return (remaining, excess); at most one of them is non-zero."""
    remaining = max(_dec(target) - _dec(current), ZERO)
    excess = max(_dec(current) - _dec(target), ZERO)
    return remaining, excess


def check_withdrawal(current: Decimal, amount: Decimal) -> None:
    """Raise InsufficientBalance when a withdrawal would overdraw the goal."""
    if _dec(amount) > _dec(current):
        raise InsufficientBalance(attempted=_dec(amount), available=_dec(current))


def summarize_goal(target: Decimal, transactions: Sequence) -> GoalProgress:
    current = compute_balance(transactions)
    progress = compute_progress(current, target)
    remaining, excess = compute_remaining(current, target)
    return GoalProgress(
        current=current,
        progress=progress,
        is_completed=progress >= HUNDRED,
        remaining=remaining,
        excess=excess,
    )


def summarize_goals(goals: Iterable) -> GoalsSummary:
    """Dashboard totals: goal count, completed goals and total saved."""
    total_goals = 0
    completed = 0
    total_saved = ZERO
    for goal in goals:
        progress = summarize_goal(goal.target, goal.transactions)
        total_goals += 1
        total_saved += progress.current
        if progress.is_completed:
            completed += 1
    return GoalsSummary(total_goals=total_goals, completed_goals=completed, total_saved=total_saved)
