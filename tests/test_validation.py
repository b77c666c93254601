"""
Tests for goal, transaction and credential validators
"""
import uuid
from decimal import Decimal

import pytest

from savings_tracker.core.exceptions import ValidationError
from savings_tracker.utils.validation import (
    MAX_AMOUNT,
    ensure_valid,
    validate_goal_input,
    validate_login,
    validate_registration,
    validate_transaction_input,
)


class TestGoalInput:
    def test_valid_goal(self):
        assert validate_goal_input({"title": "Dana darurat", "target": 500000}) == {}

    def test_minimum_target_accepted(self):
        assert validate_goal_input({"title": "x", "target": 0.01}) == {}

    def test_empty_title_rejected(self):
        errors = validate_goal_input({"title": "", "target": 1000})
        assert errors == {"title": "Title is required"}

    def test_title_length_limit(self):
        assert validate_goal_input({"title": "a" * 100, "target": 1}) == {}
        errors = validate_goal_input({"title": "a" * 101, "target": 1})
        assert errors["title"] == "Title too long"

    def test_zero_target_rejected(self):
        errors = validate_goal_input({"title": "Liburan", "target": 0})
        assert errors == {"target": "Target must be greater than 0"}

    def test_negative_target_rejected(self):
        errors = validate_goal_input({"title": "Liburan", "target": Decimal("-5")})
        assert "target" in errors

    @pytest.mark.parametrize("target", ["1000", True, float("nan"), float("inf"), [1]])
    def test_non_numeric_target_rejected(self, target):
        errors = validate_goal_input({"title": "Liburan", "target": target})
        assert errors == {"target": "Target must be a number"}

    def test_missing_fields_reported_together(self):
        errors = validate_goal_input({})
        assert set(errors) == {"title", "target"}
        assert errors["target"] == "Target is required"

    def test_target_capped_at_storage_limit(self):
        assert validate_goal_input({"title": "Rumah", "target": MAX_AMOUNT}) == {}
        errors = validate_goal_input({"title": "Rumah", "target": 1e30})
        assert errors == {"target": "Target is too large"}


class TestTransactionInput:
    def test_valid_deposit(self):
        assert validate_transaction_input({"amount": 50000, "type": "deposit", "goal_id": "abc"}) == {}

    def test_uuid_goal_id_accepted(self):
        data = {"amount": 1, "type": "withdrawal", "goal_id": uuid.uuid4()}
        assert validate_transaction_input(data) == {}

    @pytest.mark.parametrize("tx_type", ["transfer", "Deposit", "", None])
    def test_unknown_type_rejected(self, tx_type):
        errors = validate_transaction_input({"amount": 10, "type": tx_type, "goal_id": "abc"})
        assert errors == {"type": "Type must be either 'deposit' or 'withdrawal'"}

    def test_amount_below_minimum_rejected(self):
        errors = validate_transaction_input({"amount": 0.001, "type": "deposit", "goal_id": "abc"})
        assert errors == {"amount": "Amount must be greater than 0"}

    def test_amount_above_maximum_rejected(self):
        errors = validate_transaction_input({"amount": MAX_AMOUNT + 1, "type": "deposit", "goal_id": "abc"})
        assert errors == {"amount": "Amount is too large"}

    def test_empty_goal_id_rejected(self):
        errors = validate_transaction_input({"amount": 10, "type": "deposit", "goal_id": ""})
        assert errors == {"goal_id": "Goal ID is required"}

    def test_same_input_same_result(self):
        data = {"amount": -1, "type": "transfer", "goal_id": ""}
        assert validate_transaction_input(data) == validate_transaction_input(data)


class TestCredentials:
    def test_valid_registration(self):
        data = {"name": "Budi", "email": "budi@example.com", "password": "rahasia", "confirm_password": "rahasia"}
        assert validate_registration(data) == {}

    def test_name_is_optional(self):
        data = {"email": "budi@example.com", "password": "rahasia", "confirm_password": "rahasia"}
        assert validate_registration(data) == {}

    def test_short_name_rejected(self):
        data = {"name": "B", "email": "budi@example.com", "password": "rahasia", "confirm_password": "rahasia"}
        assert validate_registration(data) == {"name": "Name must be at least 2 characters"}

    def test_mismatch_reported_on_confirmation(self):
        data = {"email": "budi@example.com", "password": "rahasia", "confirm_password": "rahasia2"}
        errors = validate_registration(data)
        assert errors == {"confirm_password": "Passwords don't match"}

    def test_short_password_and_bad_email(self):
        data = {"email": "not-an-email", "password": "123", "confirm_password": "123"}
        errors = validate_registration(data)
        assert errors == {
            "email": "Invalid email address",
            "password": "Password must be at least 6 characters",
        }

    @pytest.mark.parametrize("email", ["foo..bar@example.com", "budi@", "budi example@example.com"])
    def test_malformed_email_rejected_everywhere(self, email):
        data = {"email": email, "password": "rahasia", "confirm_password": "rahasia"}
        assert validate_registration(data) == {"email": "Invalid email address"}
        assert validate_login(data) == {"email": "Invalid email address"}

    def test_login_requires_password(self):
        errors = validate_login({"email": "budi@example.com", "password": ""})
        assert errors == {"password": "Password is required"}

    def test_login_valid(self):
        assert validate_login({"email": "budi@example.com", "password": "x"}) == {}


class TestEnsureValid:
    def test_no_errors_passes(self):
        ensure_valid({})

    def test_errors_raise_with_field_map(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid({"title": "Title is required"})
        assert exc_info.value.errors == {"title": "Title is required"}
        assert exc_info.value.status_code == 422
