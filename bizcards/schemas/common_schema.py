# bizcards/schemas/common_schema.py
"""Shapes shared by user and card payloads."""

from typing import Annotated, Optional

from pydantic import AfterValidator, AnyHttpUrl, BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

_url_adapter = TypeAdapter(AnyHttpUrl)

# digit-only address fields are plain bounded integers
HOUSE_NUMBER_MAX = 1_000_000
ZIP_MAX = 999_999_999


def check_url(value: Optional[str]) -> Optional[str]:
    """Validate an http(s) URL but keep the caller's spelling of it."""
    if value is None or value == "":
        return None
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url", "must be a valid http(s) URL")
    return value


UrlStr = Annotated[Optional[str], AfterValidator(check_url)]


def check_whole_number(value):
    """Accept ints and digit strings only; booleans and floats are refused."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise PydanticCustomError("whole_number", "must be a whole number")
    if isinstance(value, str) and not value.strip().isdigit():
        raise PydanticCustomError("whole_number", "must be a whole number")
    return value


WholeNumber = Annotated[int, BeforeValidator(check_whole_number)]


class Name(BaseModel):
    first: str = Field(..., min_length=2, max_length=256)
    middle: Optional[str] = Field("", max_length=256)
    last: str = Field(..., min_length=2, max_length=256)


class Image(BaseModel):
    url: UrlStr = None
    alt: Optional[str] = Field(None, max_length=256)


class Address(BaseModel):
    state: Optional[str] = Field("", max_length=256)
    country: str = Field(..., min_length=2, max_length=256)
    city: str = Field(..., min_length=2, max_length=256)
    street: str = Field(..., min_length=2, max_length=256)
    house_number: WholeNumber = Field(..., ge=1, le=HOUSE_NUMBER_MAX, alias="houseNumber")
    zip: WholeNumber = Field(..., ge=0, le=ZIP_MAX)

    model_config = ConfigDict(populate_by_name=True)


class APIMessage(BaseModel):
    message: str = Field(..., description="Human readable message")
