from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):
    sub: Optional[str] = None
    is_admin: bool = Field(False, alias="isAdmin")
    is_business: bool = Field(False, alias="isBusiness")

    model_config = ConfigDict(populate_by_name=True)


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
