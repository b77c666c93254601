"""
Tests for the balance model: balance, progress, remaining/excess, overdraft check
"""
import itertools
import random
from collections import namedtuple
from decimal import Decimal
from types import SimpleNamespace

import pytest

from savings_tracker.core.exceptions import InsufficientBalance
from savings_tracker.utils.balance import (
    check_withdrawal,
    compute_balance,
    compute_progress,
    compute_remaining,
    is_completed,
    summarize_goal,
    summarize_goals,
)

Tx = namedtuple("Tx", "amount type")


def deposit(amount):
    return Tx(Decimal(amount), "deposit")


def withdrawal(amount):
    return Tx(Decimal(amount), "withdrawal")


class TestComputeBalance:
    def test_empty_history(self):
        assert compute_balance([]) == Decimal("0")

    def test_deposits_minus_withdrawals(self):
        history = [deposit("100000"), withdrawal("30000"), deposit("5000.50")]
        assert compute_balance(history) == Decimal("75000.50")

    def test_order_does_not_change_total(self):
        history = [deposit("10"), deposit("25.25"), withdrawal("7.10"), withdrawal("3")]
        expected = compute_balance(history)
        for permutation in itertools.permutations(history):
            assert compute_balance(permutation) == expected

    def test_matches_sums_for_random_histories(self):
        rng = random.Random(42)
        for _ in range(50):
            history = [
                Tx(Decimal(rng.randint(1, 10_000_00)) / 100, rng.choice(["deposit", "withdrawal"]))
                for _ in range(rng.randint(0, 20))
            ]
            deposits = sum((t.amount for t in history if t.type == "deposit"), Decimal("0"))
            withdrawals = sum((t.amount for t in history if t.type == "withdrawal"), Decimal("0"))
            assert compute_balance(history) == deposits - withdrawals

    def test_float_amounts_do_not_drift(self):
        history = [Tx(0.1, "deposit"), Tx(0.2, "deposit")]
        assert compute_balance(history) == Decimal("0.3")

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            compute_balance([Tx(Decimal("1"), "transfer")])

    def test_recomputing_is_stable(self):
        history = (deposit("500"), withdrawal("120"))
        assert compute_balance(history) == compute_balance(history)
        assert compute_progress(Decimal("380"), Decimal("1000")) == compute_progress(Decimal("380"), Decimal("1000"))


class TestProgress:
    def test_partial_progress(self):
        assert compute_progress(Decimal("250000"), Decimal("500000")) == Decimal("50")

    def test_clamped_at_hundred(self):
        assert compute_progress(Decimal("550000"), Decimal("500000")) == Decimal("100")

    def test_zero_balance(self):
        assert compute_progress(Decimal("0"), Decimal("10")) == Decimal("0")

    def test_always_within_bounds(self):
        rng = random.Random(7)
        for _ in range(200):
            current = Decimal(rng.randint(-1000, 100000)) / 100
            target = Decimal(rng.randint(1, 100000)) / 100
            assert Decimal("0") <= compute_progress(current, target) <= Decimal("100")

    def test_is_completed(self):
        assert is_completed(Decimal("500000"), Decimal("500000"))
        assert not is_completed(Decimal("499999.99"), Decimal("500000"))


class TestRemaining:
    def test_below_target(self):
        assert compute_remaining(Decimal("100"), Decimal("300")) == (Decimal("200"), Decimal("0"))

    def test_above_target(self):
        assert compute_remaining(Decimal("350"), Decimal("300")) == (Decimal("0"), Decimal("50"))

    def test_exact_completion(self):
        assert compute_remaining(Decimal("300"), Decimal("300")) == (Decimal("0"), Decimal("0"))


class TestCheckWithdrawal:
    def test_within_balance(self):
        check_withdrawal(Decimal("100000"), Decimal("100000"))

    def test_overdraft_rejected(self):
        with pytest.raises(InsufficientBalance) as exc_info:
            check_withdrawal(Decimal("100000"), Decimal("150000"))
        assert exc_info.value.attempted == Decimal("150000")
        assert exc_info.value.available == Decimal("100000")
        assert "amount" in exc_info.value.errors

    def test_sub_unit_balance_shown_with_cents(self):
        with pytest.raises(InsufficientBalance) as exc_info:
            check_withdrawal(Decimal("0.40"), Decimal("1.00"))
        assert exc_info.value.message == (
            "Insufficient balance: tried to withdraw Rp 1, only Rp 0,40 available"
        )


class TestSummaries:
    def test_target_reached_then_overshoot(self):
        history = [deposit("500000")]
        summary = summarize_goal(Decimal("500000"), history)
        assert summary.progress == Decimal("100")
        assert summary.excess == Decimal("0")
        assert summary.is_completed

        history.append(deposit("50000"))
        summary = summarize_goal(Decimal("500000"), history)
        assert summary.progress == Decimal("100")
        assert summary.excess == Decimal("50000")
        assert summary.remaining == Decimal("0")

    def test_dashboard_totals(self):
        goals = [
            SimpleNamespace(target=Decimal("100"), transactions=[deposit("100")]),
            SimpleNamespace(target=Decimal("1000"), transactions=[deposit("300"), withdrawal("50")]),
            SimpleNamespace(target=Decimal("10"), transactions=[]),
        ]
        summary = summarize_goals(goals)
        assert summary.total_goals == 3
        assert summary.completed_goals == 1
        assert summary.total_saved == Decimal("350")
