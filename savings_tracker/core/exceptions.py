# savings_tracker/core/exceptions.py
"""
Error taxonomy shared by the validation layer, the goal service and the API.

Every error carries the HTTP status it maps to, a human readable message and
an optional field-keyed ``errors`` map that forms render next to inputs.
"""
from decimal import Decimal
from typing import Dict, Optional

from savings_tracker.utils.money import format_currency


class SavingsTrackerError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.errors = dict(errors or {})
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"detail": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(SavingsTrackerError):
    """Malformed or out-of-range input, fixable by the user."""
    status_code = 422
    default_message = "Validation failed"

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        super().__init__(message, errors)


class Unauthorized(SavingsTrackerError):
    status_code = 401
    default_message = "Not authenticated"


class NotFound(SavingsTrackerError):
    status_code = 404
    default_message = "Goal not found"


class InsufficientBalance(SavingsTrackerError):
    """A withdrawal larger than the goal's balance at check time."""
    status_code = 409
    default_message = "Insufficient balance"

    def __init__(self, attempted: Decimal, available: Decimal):
        self.attempted = attempted
        self.available = available
        message = (
            f"Insufficient balance: tried to withdraw {format_currency(attempted, exact=True)}, "
            f"only {format_currency(available, exact=True)} available"
        )
        super().__init__(message, {"amount": message})

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["attempted"] = float(self.attempted)
        body["available"] = float(self.available)
        return body


class TransientServiceError(SavingsTrackerError):
    status_code = 503
    default_message = "The service is temporarily unavailable. Please try again."
