# savings_tracker/api/v1/routes/auth.py
import logging
import uuid

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import OAuth2PasswordRequestForm
from fastapi_users import BaseUserManager, InvalidPasswordException
from fastapi_users.exceptions import UserAlreadyExists

from savings_tracker.core.auth import User, UserCreate, UserRead, get_user_manager, create_access_token
from savings_tracker.core.exceptions import Unauthorized, ValidationError
from savings_tracker.schemas.user import LoginRequest, RegisterRequest, RegisterResponse, Token
from savings_tracker.utils.validation import ensure_valid, validate_login, validate_registration

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    request: Request,
    user_manager: BaseUserManager[User, uuid.UUID] = Depends(get_user_manager),
):
    """
    Create an account and sign it in.

    Field errors are returned per field; a password confirmation mismatch is
    reported on **confirm_password**.
    """
    ensure_valid(validate_registration(payload.model_dump()))

    user_create = UserCreate(email=payload.email, password=payload.password, full_name=payload.name)

    try:
        user = await user_manager.create(user_create, safe=True, request=request)
    except UserAlreadyExists:
        raise ValidationError({"email": "Email is already registered"})
    except InvalidPasswordException as e:
        raise ValidationError({"password": str(e.reason)})

    return RegisterResponse(
        user=UserRead.model_validate(user),
        access_token=create_access_token(str(user.id)),
    )

@router.post("/login", response_model=Token)
async def login(
    payload: LoginRequest,
    request: Request,
    user_manager: BaseUserManager[User, uuid.UUID] = Depends(get_user_manager),
):
    """JSON login for the web forms; `/jwt/login` serves OAuth2 password clients."""
    ensure_valid(validate_login(payload.model_dump()))

    credentials = OAuth2PasswordRequestForm(username=payload.email, password=payload.password)
    user = await user_manager.authenticate(credentials)
    if user is None or not user.is_active:
        logger.info(f"Failed login for {payload.email}")
        raise Unauthorized("Invalid email or password")

    await user_manager.on_after_login(user, request)
    return Token(access_token=create_access_token(str(user.id)))
