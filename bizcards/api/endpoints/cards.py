import logging
import traceback
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from bizcards.api.deps import RecordId, get_card_service, get_current_user, get_optional_user
from bizcards.core.exceptions import InternalServerException
from bizcards.schemas.card_schema import BizNumberUpdate, CardCreate, CardOut, CardSummaryOut, CardUpdate
from bizcards.schemas.common_schema import APIMessage
from bizcards.services.card_service import CardService

router = APIRouter(prefix="/api/cards", tags=["cards"])


@router.post("", response_model=CardOut, status_code=status.HTTP_201_CREATED)
async def create_card(
        card_in: CardCreate,
        current_user: dict = Depends(get_current_user),
        card_svc: CardService = Depends(get_card_service),
):
    try:
        return await card_svc.create_card(current_user, card_in)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in create_card: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.get("", response_model=List[CardSummaryOut])
async def list_cards(
        viewer: Optional[dict] = Depends(get_optional_user),
        card_svc: CardService = Depends(get_card_service),
):
    try:
        return await card_svc.list_cards(viewer)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in list_cards: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.get("/my-cards", response_model=List[CardOut])
async def list_my_cards(
        current_user: dict = Depends(get_current_user),
        card_svc: CardService = Depends(get_card_service),
):
    try:
        return await card_svc.list_my_cards(current_user)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in list_my_cards: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.get("/{card_id}", response_model=CardOut)
async def read_card(card_id: RecordId, card_svc: CardService = Depends(get_card_service)):
    try:
        return await card_svc.get_card(card_id)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in read_card: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.put("/{card_id}", response_model=CardOut)
async def update_card(
        card_id: RecordId,
        card_in: CardUpdate,
        current_user: dict = Depends(get_current_user),
        card_svc: CardService = Depends(get_card_service),
):
    try:
        return await card_svc.update_card(current_user, card_id, card_in)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in update_card: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.delete("/{card_id}", response_model=APIMessage)
async def delete_card(
        card_id: RecordId,
        current_user: dict = Depends(get_current_user),
        card_svc: CardService = Depends(get_card_service),
):
    try:
        await card_svc.delete_card(current_user, card_id)
        return APIMessage(message=f"Card with id {card_id} deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in delete_card: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.patch("/like/{card_id}", response_model=CardOut)
async def toggle_like(
        card_id: RecordId,
        current_user: dict = Depends(get_current_user),
        card_svc: CardService = Depends(get_card_service),
):
    try:
        return await card_svc.toggle_like(current_user, card_id)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in toggle_like: {e}\n{traceback.format_exc()}")
        raise InternalServerException()


@router.patch("/bizNumber/{card_id}", response_model=CardOut)
async def change_biz_number(
        card_id: RecordId,
        body: BizNumberUpdate,
        current_user: dict = Depends(get_current_user),
        card_svc: CardService = Depends(get_card_service),
):
    try:
        return await card_svc.change_biz_number(current_user, card_id, body.biz_number)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Internal Server Error in change_biz_number: {e}\n{traceback.format_exc()}")
        raise InternalServerException()
