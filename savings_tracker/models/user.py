# savings_tracker/models/user.py
# Note: User is defined in core/auth.py next to its fastapi-users wiring.
# Import it from here so model registries see every table.

from savings_tracker.core.auth import User

__all__ = ["User"]
