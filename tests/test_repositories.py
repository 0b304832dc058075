import asyncio
from datetime import datetime, timezone

import pytest

from bizcards.repositories.card_repo import DuplicateBizNumberError, _to_card
from bizcards.repositories.memory import InMemoryCardRepository, InMemoryUserRepository, MemoryStore
from bizcards.repositories.user_repo import _profile_args, _to_user

ADDRESS = {"state": "", "country": "Israel", "city": "Haifa", "street": "Herzl", "house_number": 3, "zip": 3303}


def make_card(biz_number=1):
    return {
        "title": "Card", "subtitle": "", "description": "", "phone": "0541112222",
        "email": "c@c.com", "web": None, "image": {"url": None, "alt": None},
        "address": dict(ADDRESS), "biz_number": biz_number,
    }


@pytest.fixture()
def cards():
    return InMemoryCardRepository(MemoryStore())


def test_memory_card_biz_number_is_unique(cards):
    first = asyncio.run(cards.create(1, make_card(100)))
    second = asyncio.run(cards.create(1, make_card(200)))

    with pytest.raises(DuplicateBizNumberError):
        asyncio.run(cards.create(2, make_card(100)))
    with pytest.raises(DuplicateBizNumberError):
        asyncio.run(cards.set_biz_number(second["id"], 100))

    # keeping its own number is not a collision
    assert asyncio.run(cards.set_biz_number(first["id"], 100))["biz_number"] == 100
    assert asyncio.run(cards.get_by_biz_number(100, exclude_id=first["id"])) is None
    assert asyncio.run(cards.get_by_biz_number(100))["id"] == first["id"]


def test_memory_toggle_like(cards):
    card = asyncio.run(cards.create(1, make_card()))
    assert asyncio.run(cards.toggle_like(card["id"], 7))["likes"] == [7]
    assert asyncio.run(cards.toggle_like(card["id"], 8))["likes"] == [7, 8]
    assert asyncio.run(cards.toggle_like(card["id"], 7))["likes"] == [8]
    assert asyncio.run(cards.toggle_like(999, 7)) is None


def test_memory_records_are_copies(cards):
    card = asyncio.run(cards.create(1, make_card()))
    card["likes"].append(5)
    card["address"]["city"] = "Elsewhere"
    stored = asyncio.run(cards.get_by_id(card["id"]))
    assert stored["likes"] == []
    assert stored["address"]["city"] == "Haifa"


def test_memory_users():
    users = InMemoryUserRepository(MemoryStore())
    created = asyncio.run(users.create({
        "name": {"first": "Dana", "middle": "", "last": "Levi"}, "phone": "0521234567",
        "email": "d@l.com", "image": None, "address": dict(ADDRESS),
        "hashed_password": "x", "is_business": False,
    }))
    assert created["is_admin"] is False
    assert asyncio.run(users.get_by_email("d@l.com"))["id"] == created["id"]
    assert asyncio.run(users.toggle_business(created["id"]))["is_business"] is True
    assert asyncio.run(users.count()) == 1
    assert asyncio.run(users.delete(created["id"])) is True
    assert asyncio.run(users.delete(created["id"])) is False
    assert asyncio.run(users.toggle_business(created["id"])) is None


def test_card_row_is_shaped_like_the_api():
    now = datetime.now(timezone.utc)
    row = {
        "id": 3, "title": "T", "subtitle": "S", "description": "D", "phone": "0541112222",
        "email": "c@c.com", "web": None, "image_url": None, "image_alt": None,
        **ADDRESS, "biz_number": 55, "user_id": 9, "likes": None, "created_at": now,
    }
    card = _to_card(row)
    assert card["likes"] == []
    assert card["image"] == {"url": None, "alt": None}
    assert card["address"] == ADDRESS
    assert _to_card(None) is None


def test_user_row_roundtrip_through_profile_args():
    row = {
        "id": 1, "first_name": "Dana", "middle_name": "", "last_name": "Levi",
        "phone": "0521234567", "email": "d@l.com", "hashed_password": "h",
        "image_url": "https://example.com/d.png", "image_alt": "Dana", **ADDRESS,
        "is_business": True, "is_admin": False, "created_at": None,
    }
    user = _to_user(row)
    assert user["name"] == {"first": "Dana", "middle": "", "last": "Levi"}
    assert user["image"] == {"url": "https://example.com/d.png", "alt": "Dana"}
    assert _profile_args(user) == (
        "Dana", "", "Levi", "0521234567", "d@l.com", "https://example.com/d.png", "Dana",
        "", "Israel", "Haifa", "Herzl", 3, 3303,
    )
