import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from bizcards.schemas.common_schema import Address, Image, Name

PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[.!_@#$%^&*-])[A-Za-z\d.!_@#$%^&*-]{6,}$"
)


class UserBase(BaseModel):
    name: Name
    phone: str = Field(..., min_length=9, max_length=11)
    email: EmailStr
    image: Optional[Image] = None
    address: Address

    model_config = ConfigDict(populate_by_name=True)


class UserRegister(UserBase):
    password: str = Field(..., min_length=6)
    is_business: bool = Field(False, alias="isBusiness")
    is_admin: bool = Field(False, alias="isAdmin")

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not PASSWORD_PATTERN.match(value):
            raise PydanticCustomError(
                "password_strength",
                "must contain an uppercase letter, a lowercase letter, a digit "
                "and one of .!_@#$%^&*- (letters, digits and those symbols only)",
            )
        return value


class UserUpdate(UserBase):
    pass


class UserOut(UserBase):
    id: int
    email: str
    is_business: bool = Field(False, alias="isBusiness")
    is_admin: bool = Field(False, alias="isAdmin")
    created_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
