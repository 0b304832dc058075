import pytest
from pydantic import ValidationError

from bizcards.schemas.card_schema import CardCreate
from bizcards.schemas.common_schema import Address, Image
from bizcards.schemas.user_schema import UserRegister

from conftest import card_payload, user_payload


@pytest.mark.parametrize("password", ["Abcdef1!", "Pass.w0rd", "Z9z-zz"])
def test_strong_passwords(password):
    assert UserRegister(**user_payload(password=password)).password == password


@pytest.mark.parametrize("password", ["abcdef1!", "ABCDEF1!", "Abcdefg!", "Abcdef12", "Abc1!", "Abcdef1!~"])
def test_weak_passwords(password):
    with pytest.raises(ValidationError):
        UserRegister(**user_payload(password=password))


def test_address_digit_strings_become_numbers():
    address = Address(country="Israel", city="Haifa", street="Herzl", houseNumber="007", zip="0042")
    assert address.house_number == 7
    assert address.zip == 42
    assert address.model_dump(by_alias=True)["houseNumber"] == 7


@pytest.mark.parametrize("house_number", [0, -3, "12b", 10_000_000])
def test_address_house_number_bounds(house_number):
    with pytest.raises(ValidationError):
        Address(country="Israel", city="Haifa", street="Herzl", houseNumber=house_number, zip=1)


@pytest.mark.parametrize("value", [True, False, 7.5, 7.0])
def test_address_numbers_refuse_booleans_and_floats(value):
    with pytest.raises(ValidationError, match="whole number"):
        Address(country="Israel", city="Haifa", street="Herzl", houseNumber=value, zip=1)
    with pytest.raises(ValidationError, match="whole number"):
        Address(country="Israel", city="Haifa", street="Herzl", houseNumber=1, zip=value)


def test_image_url_may_be_empty_but_not_garbage():
    assert Image(url="", alt="").url is None
    assert Image(url="https://example.com/a.png").url == "https://example.com/a.png"
    with pytest.raises(ValidationError):
        Image(url="not a url")


def test_register_defaults_role_flags():
    payload = user_payload()
    payload.pop("isBusiness")
    user = UserRegister(**payload)
    assert user.is_business is False
    assert user.is_admin is False


def test_card_ignores_client_owner_and_keeps_web_spelling():
    card = CardCreate(**card_payload(user_id="abc"))
    assert "user_id" not in card.model_dump()
    assert card.web == "https://falafelking.com"
    assert card.biz_number == 5000001


def test_card_biz_number_must_be_positive():
    with pytest.raises(ValidationError):
        CardCreate(**card_payload(biz_number=0))
