# bizcards/services/card_service.py

import logging
from typing import Optional

from bizcards.core.exceptions import BizNumberTakenException, ForbiddenException, NotFoundException
from bizcards.core.permissions import ensure_can_mutate
from bizcards.repositories.card_repo import DuplicateBizNumberError
from bizcards.schemas.card_schema import CardCreate, CardUpdate

logger = logging.getLogger(__name__)


def summarize_card(card: dict, viewer_id: Optional[int] = None) -> dict:
    """Replace the raw likes set with its size and the viewer's own like state."""
    summary = {key: value for key, value in card.items() if key != "likes"}
    likes = card.get("likes") or []
    summary["likes_count"] = len(likes)
    summary["is_liked_by_current_user"] = viewer_id is not None and viewer_id in likes
    return summary


class CardService:
    def __init__(self, card_repo):
        self.card_repo = card_repo

    async def _get_owned_card(self, actor: dict, card_id: int, detail: str) -> dict:
        card = await self.get_card(card_id)
        ensure_can_mutate(actor, card["user_id"], detail)
        return card

    async def _ensure_biz_number_free(self, biz_number: int, exclude_id: Optional[int] = None) -> None:
        if await self.card_repo.get_by_biz_number(biz_number, exclude_id=exclude_id):
            raise BizNumberTakenException()

    async def create_card(self, actor: dict, card_in: CardCreate) -> dict:
        if not actor.get("is_business", False):
            raise ForbiddenException("Only business users can create cards")

        await self._ensure_biz_number_free(card_in.biz_number)
        try:
            card = await self.card_repo.create(actor["id"], card_in.model_dump())
        except DuplicateBizNumberError:
            raise BizNumberTakenException()
        logger.info("User %s created card %s", actor["id"], card["id"])
        return card

    async def list_cards(self, viewer: Optional[dict] = None) -> list[dict]:
        cards = await self.card_repo.list_all()
        if not cards:
            raise NotFoundException("Cards", detail="No cards found")
        viewer_id = viewer["id"] if viewer else None
        return [summarize_card(card, viewer_id) for card in cards]

    async def list_my_cards(self, actor: dict) -> list[dict]:
        cards = await self.card_repo.list_by_user(actor["id"])
        if not cards:
            raise NotFoundException("Cards", detail="You have no cards")
        return cards

    async def get_card(self, card_id: int) -> dict:
        card = await self.card_repo.get_by_id(card_id)
        if card is None:
            raise NotFoundException("Card", card_id)
        return card

    async def update_card(self, actor: dict, card_id: int, card_in: CardUpdate) -> dict:
        await self._get_owned_card(
            actor, card_id,
            "Access denied: You can only update your own cards or must be admin",
        )
        await self._ensure_biz_number_free(card_in.biz_number, exclude_id=card_id)
        try:
            updated = await self.card_repo.update(card_id, card_in.model_dump())
        except DuplicateBizNumberError:
            raise BizNumberTakenException()
        if updated is None:
            raise NotFoundException("Card", card_id)
        return updated

    async def delete_card(self, actor: dict, card_id: int) -> None:
        await self._get_owned_card(
            actor, card_id,
            "Access denied: You can only delete your own cards or must be admin",
        )
        if not await self.card_repo.delete(card_id):
            raise NotFoundException("Card", card_id)

    async def toggle_like(self, actor: dict, card_id: int) -> dict:
        # not idempotent: every call flips the caller's like
        card = await self.card_repo.toggle_like(card_id, actor["id"])
        if card is None:
            raise NotFoundException("Card", card_id)
        return card

    async def change_biz_number(self, actor: dict, card_id: int, biz_number: int) -> dict:
        await self._get_owned_card(
            actor, card_id,
            "Access denied: You can only update your own cards or must be admin",
        )
        await self._ensure_biz_number_free(biz_number, exclude_id=card_id)
        try:
            card = await self.card_repo.set_biz_number(card_id, biz_number)
        except DuplicateBizNumberError:
            raise BizNumberTakenException()
        if card is None:
            raise NotFoundException("Card", card_id)
        return card
