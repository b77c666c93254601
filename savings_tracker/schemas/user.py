# savings_tracker/schemas/user.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from savings_tracker.core.auth import UserRead

# Fields are loosely typed on purpose: the credential validators report
# missing or malformed values per field.
class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(None, alias="confirmPassword")

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class RegisterResponse(Token):
    user: UserRead
