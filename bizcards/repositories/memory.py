"""In-process repositories with the same interface as the asyncpg ones.

Used when ``STORAGE_BACKEND=memory`` and by the test-suite. Every record
handed out is a deep copy, so callers can never mutate stored state.
"""

import copy
import itertools
from datetime import datetime, timezone

from bizcards.repositories.card_repo import DuplicateBizNumberError

_PROFILE_FIELDS = ("name", "phone", "email", "image", "address")
_CARD_FIELDS = (
    "title", "subtitle", "description", "phone", "email", "web",
    "image", "address", "biz_number",
)


class MemoryStore:
    """Holds both collections for one application instance."""

    def __init__(self):
        self.users: dict[int, dict] = {}
        self.cards: dict[int, dict] = {}
        self.user_ids = itertools.count(1)
        self.card_ids = itertools.count(1)


class InMemoryUserRepository:

    def __init__(self, store: MemoryStore):
        self.store = store

    async def get_by_id(self, user_id: int) -> dict | None:
        user = self.store.users.get(user_id)
        return copy.deepcopy(user) if user else None

    async def get_by_email(self, email: str) -> dict | None:
        for user in self.store.users.values():
            if user["email"] == email:
                return copy.deepcopy(user)
        return None

    async def list_all(self) -> list[dict]:
        return [copy.deepcopy(u) for _, u in sorted(self.store.users.items())]

    async def count(self) -> int:
        return len(self.store.users)

    async def create(self, user_in: dict) -> dict:
        user = {field: copy.deepcopy(user_in.get(field)) for field in _PROFILE_FIELDS}
        user.update(
            id=next(self.store.user_ids),
            hashed_password=user_in["hashed_password"],
            is_business=bool(user_in.get("is_business", False)),
            is_admin=bool(user_in.get("is_admin", False)),
            created_at=datetime.now(timezone.utc),
        )
        self.store.users[user["id"]] = user
        return copy.deepcopy(user)

    async def update(self, user_id: int, user_in: dict) -> dict | None:
        user = self.store.users.get(user_id)
        if user is None:
            return None
        for field in _PROFILE_FIELDS:
            user[field] = copy.deepcopy(user_in.get(field))
        return copy.deepcopy(user)

    async def toggle_business(self, user_id: int) -> dict | None:
        user = self.store.users.get(user_id)
        if user is None:
            return None
        user["is_business"] = not user["is_business"]
        return copy.deepcopy(user)

    async def delete(self, user_id: int) -> bool:
        return self.store.users.pop(user_id, None) is not None


class InMemoryCardRepository:

    def __init__(self, store: MemoryStore):
        self.store = store

    def _check_biz_number(self, biz_number: int, exclude_id: int | None = None) -> None:
        for card_id, card in self.store.cards.items():
            if card["biz_number"] == biz_number and card_id != exclude_id:
                raise DuplicateBizNumberError("Business number already exists")

    async def get_by_id(self, card_id: int) -> dict | None:
        card = self.store.cards.get(card_id)
        return copy.deepcopy(card) if card else None

    async def get_by_biz_number(self, biz_number: int, exclude_id: int | None = None) -> dict | None:
        for card_id, card in self.store.cards.items():
            if card["biz_number"] == biz_number and card_id != exclude_id:
                return copy.deepcopy(card)
        return None

    async def list_all(self) -> list[dict]:
        return [copy.deepcopy(c) for _, c in sorted(self.store.cards.items())]

    async def list_by_user(self, user_id: int) -> list[dict]:
        return [
            copy.deepcopy(c) for _, c in sorted(self.store.cards.items())
            if c["user_id"] == user_id
        ]

    async def create(self, user_id: int, card_in: dict) -> dict:
        self._check_biz_number(card_in["biz_number"])
        card = {field: copy.deepcopy(card_in.get(field)) for field in _CARD_FIELDS}
        card.update(
            id=next(self.store.card_ids),
            user_id=user_id,
            likes=[],
            created_at=datetime.now(timezone.utc),
        )
        self.store.cards[card["id"]] = card
        return copy.deepcopy(card)

    async def update(self, card_id: int, card_in: dict) -> dict | None:
        card = self.store.cards.get(card_id)
        if card is None:
            return None
        self._check_biz_number(card_in["biz_number"], exclude_id=card_id)
        for field in _CARD_FIELDS:
            card[field] = copy.deepcopy(card_in.get(field))
        return copy.deepcopy(card)

    async def set_biz_number(self, card_id: int, biz_number: int) -> dict | None:
        card = self.store.cards.get(card_id)
        if card is None:
            return None
        self._check_biz_number(biz_number, exclude_id=card_id)
        card["biz_number"] = biz_number
        return copy.deepcopy(card)

    async def toggle_like(self, card_id: int, user_id: int) -> dict | None:
        card = self.store.cards.get(card_id)
        if card is None:
            return None
        if user_id in card["likes"]:
            card["likes"].remove(user_id)
        else:
            card["likes"].append(user_id)
        return copy.deepcopy(card)

    async def delete(self, card_id: int) -> bool:
        return self.store.cards.pop(card_id, None) is not None
