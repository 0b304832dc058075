# bizcards/schemas/card_schema.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from bizcards.schemas.common_schema import Address, Image, UrlStr

BIZ_NUMBER_MAX = 9_999_999_999


class CardBase(BaseModel):
    title: str = Field(..., min_length=2, max_length=256)
    subtitle: str = Field(..., max_length=256)
    description: Optional[str] = Field("", max_length=1024)
    phone: str = Field(..., min_length=9, max_length=11)
    email: EmailStr
    web: UrlStr = None
    image: Image
    address: Address
    biz_number: int = Field(..., ge=1, le=BIZ_NUMBER_MAX, alias="bizNumber")

    model_config = ConfigDict(populate_by_name=True)


class CardCreate(CardBase):
    """Body of card creation; any ``user_id`` sent by the client is ignored."""

    @field_validator("web")
    @classmethod
    def web_min_length(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) < 14:
            raise PydanticCustomError("web_length", "must be at least 14 characters long")
        return value


class CardUpdate(CardCreate):
    pass


class BizNumberUpdate(BaseModel):
    biz_number: int = Field(..., ge=1, le=BIZ_NUMBER_MAX, alias="bizNumber")

    model_config = ConfigDict(populate_by_name=True)


class CardOut(CardBase):
    """Full card record, likes included."""
    id: int
    email: str
    user_id: int
    likes: List[int] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class CardSummaryOut(CardBase):
    """Card as listed publicly: likes reduced to a count and the caller's own state."""
    id: int
    email: str
    user_id: int
    likes_count: int = Field(0, alias="likesCount")
    is_liked_by_current_user: bool = Field(False, alias="isLikedByCurrentUser")
    created_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
