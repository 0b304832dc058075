# bizcards/api/routers.py
from fastapi import APIRouter
from bizcards.api.endpoints import cards, users

router = APIRouter()

router.include_router(users.router)
router.include_router(cards.router)
