"""Owner-or-admin authorization rule shared by every mutation endpoint."""

from bizcards.core.exceptions import ForbiddenException


def can_mutate(actor_id: int, actor_is_admin: bool, owner_id: int) -> bool:
    return bool(actor_is_admin) or actor_id == owner_id


def ensure_can_mutate(actor: dict, owner_id: int, detail: str) -> None:
    if not can_mutate(actor["id"], actor.get("is_admin", False), owner_id):
        raise ForbiddenException(detail)


def ensure_admin(actor: dict, detail: str = "Access denied: only for admins permissions") -> None:
    if not actor.get("is_admin", False):
        raise ForbiddenException(detail)
