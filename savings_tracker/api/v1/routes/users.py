# savings_tracker/api/v1/routes/users.py
from fastapi import APIRouter, Depends

from savings_tracker.core.auth import User, UserRead
from savings_tracker.api.deps import get_current_user

router = APIRouter(tags=["User Management"])

@router.get("/me", response_model=UserRead)
async def read_own_profile(
    user: User = Depends(get_current_user)
):
    """Get current user's profile"""
    return user
