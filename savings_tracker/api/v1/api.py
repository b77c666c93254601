from fastapi import APIRouter

from savings_tracker.api.v1.routes import auth, users, goals, transactions
from savings_tracker.core.auth import fastapi_users, auth_backend

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth")
# JWT login/logout for OAuth2 password clients
api_router.include_router(
    fastapi_users.get_auth_router(auth_backend),
    prefix="/auth/jwt",
    tags=["Authentication"],
)
api_router.include_router(users.router, prefix="/users")
api_router.include_router(goals.router)
api_router.include_router(transactions.router)
