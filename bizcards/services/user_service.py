from bizcards.core.exceptions import NotFoundException, UserAlreadyExistsException
from bizcards.core.permissions import ensure_admin, ensure_can_mutate
from bizcards.schemas.user_schema import UserUpdate


class UserService:
    def __init__(self, user_repo):
        self.user_repo = user_repo

    async def get_user(self, user_id: int) -> dict:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundException("User")
        return user

    async def list_users(self, actor: dict) -> list[dict]:
        ensure_admin(actor)
        users = await self.user_repo.list_all()
        if not users:
            raise NotFoundException("Users", detail="No users found")
        return users

    async def update_user(self, actor: dict, user_id: int, user_in: UserUpdate) -> dict:
        ensure_can_mutate(
            actor, user_id,
            "Access denied: You can only update your own profile or must be admin",
        )
        current = await self.get_user(user_id)

        if user_in.email != current["email"]:
            other = await self.user_repo.get_by_email(user_in.email)
            if other and other["id"] != user_id:
                raise UserAlreadyExistsException("email")

        updated = await self.user_repo.update(user_id, user_in.model_dump())
        if updated is None:
            raise NotFoundException("User")
        return updated

    async def delete_user(self, actor: dict, user_id: int) -> None:
        ensure_can_mutate(
            actor, user_id,
            "Access denied: You can only delete your own account or must be admin",
        )
        if not await self.user_repo.delete(user_id):
            raise NotFoundException("User")

    async def toggle_business(self, actor: dict, user_id: int) -> dict:
        ensure_can_mutate(
            actor, user_id,
            "Access denied: You can only change your own business status or must be admin",
        )
        user = await self.user_repo.toggle_business(user_id)
        if user is None:
            raise NotFoundException("User")
        return user
