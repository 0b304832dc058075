from asyncpg import Connection, UniqueViolationError
from typing import Optional

from bizcards.repositories.records import flatten_address, flatten_image, inflate_address, inflate_image


class DuplicateBizNumberError(ValueError):
    pass


def _to_card(record) -> Optional[dict]:
    if record is None:
        return None
    return {
        "id": record["id"],
        "title": record["title"],
        "subtitle": record["subtitle"],
        "description": record["description"],
        "phone": record["phone"],
        "email": record["email"],
        "web": record["web"],
        "image": inflate_image(record) or {"url": None, "alt": None},
        "address": inflate_address(record),
        "biz_number": record["biz_number"],
        "user_id": record["user_id"],
        "likes": list(record["likes"] or []),
        "created_at": record["created_at"],
    }


def _card_args(card_in: dict) -> tuple:
    return (
        card_in["title"],
        card_in["subtitle"],
        card_in.get("description") or "",
        card_in["phone"],
        card_in["email"],
        card_in.get("web"),
        *flatten_image(card_in.get("image")),
        *flatten_address(card_in["address"]),
        card_in["biz_number"],
    )


class CardRepository:
    """asyncpg access to the ``cards`` table."""

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def get_by_id(self, card_id: int) -> dict | None:
        sql = "SELECT * FROM cards WHERE id = $1;"
        record = await self.conn.fetchrow(sql, card_id)
        return _to_card(record)

    async def get_by_biz_number(self, biz_number: int, exclude_id: int | None = None) -> dict | None:
        if exclude_id is None:
            record = await self.conn.fetchrow("SELECT * FROM cards WHERE biz_number = $1;", biz_number)
        else:
            sql = "SELECT * FROM cards WHERE biz_number = $1 AND id <> $2;"
            record = await self.conn.fetchrow(sql, biz_number, exclude_id)
        return _to_card(record)

    async def list_all(self) -> list[dict]:
        records = await self.conn.fetch("SELECT * FROM cards ORDER BY id;")
        return [_to_card(record) for record in records]

    async def list_by_user(self, user_id: int) -> list[dict]:
        sql = "SELECT * FROM cards WHERE user_id = $1 ORDER BY id;"
        records = await self.conn.fetch(sql, user_id)
        return [_to_card(record) for record in records]

    # ------------------ Creation ------------------ #

    async def create(self, user_id: int, card_in: dict) -> dict:
        sql = """
            INSERT INTO cards (
                title, subtitle, description, phone, email, web, image_url, image_alt,
                state, country, city, street, house_number, zip, biz_number, user_id, likes
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15, $16, '{}')
            RETURNING *;
        """
        try:
            record = await self.conn.fetchrow(sql, *_card_args(card_in), user_id)
        except UniqueViolationError:
            raise DuplicateBizNumberError("Business number already exists")
        return _to_card(record)

    # ------------------ Update Methods ------------------ #

    async def update(self, card_id: int, card_in: dict) -> dict | None:
        sql = """
            UPDATE cards SET
                title = $2, subtitle = $3, description = $4, phone = $5, email = $6, web = $7,
                image_url = $8, image_alt = $9, state = $10, country = $11, city = $12,
                street = $13, house_number = $14, zip = $15, biz_number = $16
            WHERE id = $1
            RETURNING *;
        """
        try:
            record = await self.conn.fetchrow(sql, card_id, *_card_args(card_in))
        except UniqueViolationError:
            raise DuplicateBizNumberError("Business number already exists")
        return _to_card(record)

    async def set_biz_number(self, card_id: int, biz_number: int) -> dict | None:
        sql = "UPDATE cards SET biz_number = $2 WHERE id = $1 RETURNING *;"
        try:
            record = await self.conn.fetchrow(sql, card_id, biz_number)
        except UniqueViolationError:
            raise DuplicateBizNumberError("Business number already exists")
        return _to_card(record)

    async def toggle_like(self, card_id: int, user_id: int) -> dict | None:
        # membership test and write happen in one statement
        sql = """
            UPDATE cards SET likes = CASE
                WHEN $2::int = ANY(likes) THEN array_remove(likes, $2::int)
                ELSE array_append(likes, $2::int)
            END
            WHERE id = $1
            RETURNING *;
        """
        record = await self.conn.fetchrow(sql, card_id, user_id)
        return _to_card(record)

    async def delete(self, card_id: int) -> bool:
        deleted = await self.conn.fetchval("DELETE FROM cards WHERE id = $1 RETURNING id;", card_id)
        return deleted is not None
