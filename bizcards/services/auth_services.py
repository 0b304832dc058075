import logging
from typing import Optional

from bizcards.core.config import settings
from bizcards.core.exceptions import UserAlreadyExistsException
from bizcards.core.security import build_claims, create_access_token, hash_password, verify_password
from bizcards.schemas.user_schema import UserRegister

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repo):
        self.user_repo = user_repo

    async def register_user(self, user_in: UserRegister) -> dict:
        existing = await self.user_repo.get_by_email(user_in.email)
        if existing:
            raise UserAlreadyExistsException("email")

        user_data = user_in.model_dump(exclude={"password"})
        user_data["hashed_password"] = hash_password(user_in.password)
        if not settings.ALLOW_ADMIN_SIGNUP:
            # admin rights are never granted through self-registration
            user_data["is_admin"] = False
        user = await self.user_repo.create(user_data)
        logger.info("Registered user %s (business=%s)", user["id"], user["is_business"])
        return user

    async def authenticate(self, email: str, password: str) -> Optional[dict]:
        user = await self.user_repo.get_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.get("hashed_password", "")):
            return None
        return user

    def create_token_for_user(self, user: dict) -> str:
        return create_access_token(subject=str(user["id"]), claims=build_claims(user))
