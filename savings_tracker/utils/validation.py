"""
Input validation for goals, transactions and credentials.

Each validator takes the raw request payload and returns a field-keyed map of
error messages; an empty map means the input is acceptable. Validators never
raise for bad input, so forms, API routes and programmatic callers all get the
same answer for the same payload. ``ensure_valid`` turns a non-empty map into
a ``ValidationError``.
"""
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional
import uuid

from email_validator import EmailNotValidError, validate_email

from savings_tracker.core.exceptions import ValidationError

DEPOSIT = "deposit"
WITHDRAWAL = "withdrawal"
TRANSACTION_TYPES = (DEPOSIT, WITHDRAWAL)

MIN_AMOUNT = Decimal("0.01")
# Largest value a Numeric(14, 2) column holds
MAX_AMOUNT = Decimal("999999999999.99")
TITLE_MAX_LENGTH = 100
NAME_MIN_LENGTH = 2
PASSWORD_MIN_LENGTH = 6


def as_number(value: Any) -> Optional[Decimal]:
    """
    Return value as a finite Decimal, or None when it is not a number.

    Strings and booleans are not numbers here; the HTTP layer has already
    decoded JSON numbers by the time a payload reaches the validators.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def _check_amount(value: Any, label: str) -> Optional[str]:
    if value is None:
        return f"{label} is required"
    number = as_number(value)
    if number is None:
        return f"{label} must be a number"
    if number < MIN_AMOUNT:
        return f"{label} must be greater than 0"
    if number > MAX_AMOUNT:
        return f"{label} is too large"
    return None


def _check_email(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return "Invalid email address"
    try:
        # Same check pydantic EmailStr runs when the account is created
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "Invalid email address"
    return None


def validate_goal_input(data: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    title = data.get("title")
    if not isinstance(title, str) or len(title) < 1:
        errors["title"] = "Title is required"
    elif len(title) > TITLE_MAX_LENGTH:
        errors["title"] = "Title too long"

    target_error = _check_amount(data.get("target"), "Target")
    if target_error:
        errors["target"] = target_error

    return errors


def validate_transaction_input(data: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    amount_error = _check_amount(data.get("amount"), "Amount")
    if amount_error:
        errors["amount"] = amount_error

    # Closed set: anything but the two known kinds is rejected, including case variants
    if data.get("type") not in TRANSACTION_TYPES:
        errors["type"] = "Type must be either 'deposit' or 'withdrawal'"

    goal_id = data.get("goal_id")
    if isinstance(goal_id, uuid.UUID):
        goal_id = str(goal_id)
    if not isinstance(goal_id, str) or not goal_id:
        errors["goal_id"] = "Goal ID is required"

    return errors


def validate_registration(data: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    name = data.get("name")
    if name is not None and (not isinstance(name, str) or len(name) < NAME_MIN_LENGTH):
        errors["name"] = f"Name must be at least {NAME_MIN_LENGTH} characters"

    email_error = _check_email(data.get("email"))
    if email_error:
        errors["email"] = email_error

    password = data.get("password")
    password_error = validate_password(password)
    if password_error:
        errors["password"] = password_error

    # Mismatch belongs to the confirmation field, not the password itself
    if data.get("confirm_password") != password:
        errors["confirm_password"] = "Passwords don't match"

    return errors


def validate_login(data: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    email_error = _check_email(data.get("email"))
    if email_error:
        errors["email"] = email_error

    password = data.get("password")
    if not isinstance(password, str) or not password:
        errors["password"] = "Password is required"

    return errors


def validate_password(password: Any) -> Optional[str]:
    """Password rule shared by registration and the user manager."""
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
    return None


def ensure_valid(errors: Dict[str, str]) -> None:
    if errors:
        raise ValidationError(errors)
