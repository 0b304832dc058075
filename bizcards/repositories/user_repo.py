from typing import Optional
from asyncpg import Connection

from bizcards.repositories.records import flatten_address, flatten_image, inflate_address, inflate_image

_USER_COLUMNS = """
    first_name, middle_name, last_name, phone, email,
    image_url, image_alt, state, country, city, street, house_number, zip,
    hashed_password, is_business, is_admin
"""


def _to_user(record) -> Optional[dict]:
    if record is None:
        return None
    return {
        "id": record["id"],
        "name": {
            "first": record["first_name"],
            "middle": record["middle_name"],
            "last": record["last_name"],
        },
        "phone": record["phone"],
        "email": record["email"],
        "hashed_password": record["hashed_password"],
        "image": inflate_image(record),
        "address": inflate_address(record),
        "is_business": record["is_business"],
        "is_admin": record["is_admin"],
        "created_at": record["created_at"],
    }


def _profile_args(user_in: dict) -> tuple:
    name = user_in["name"]
    return (
        name["first"],
        name.get("middle") or "",
        name["last"],
        user_in["phone"],
        user_in["email"],
        *flatten_image(user_in.get("image")),
        *flatten_address(user_in["address"]),
    )


class UserRepository:

    def __init__(self, conn: Connection):
        self.conn = conn

    async def get_by_id(self, user_id: int) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE id = $1;"
        record = await self.conn.fetchrow(sql, user_id)
        return _to_user(record)

    async def get_by_email(self, email: str) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE email = $1;"
        record = await self.conn.fetchrow(sql, email)
        return _to_user(record)

    async def list_all(self) -> list[dict]:
        records = await self.conn.fetch("SELECT * FROM users ORDER BY id;")
        return [_to_user(record) for record in records]

    async def count(self) -> int:
        return await self.conn.fetchval("SELECT COUNT(*) FROM users;")

    async def create(self, user_in: dict) -> dict:
        sql = f"""
            INSERT INTO users ({_USER_COLUMNS})
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15, $16)
            RETURNING *;
        """
        record = await self.conn.fetchrow(
            sql,
            *_profile_args(user_in),
            user_in["hashed_password"],
            bool(user_in.get("is_business", False)),
            bool(user_in.get("is_admin", False)),
        )
        return _to_user(record)

    async def update(self, user_id: int, user_in: dict) -> Optional[dict]:
        sql = """
            UPDATE users SET
                first_name = $2, middle_name = $3, last_name = $4, phone = $5, email = $6,
                image_url = $7, image_alt = $8, state = $9, country = $10, city = $11,
                street = $12, house_number = $13, zip = $14
            WHERE id = $1
            RETURNING *;
        """
        record = await self.conn.fetchrow(sql, user_id, *_profile_args(user_in))
        return _to_user(record)

    async def toggle_business(self, user_id: int) -> Optional[dict]:
        sql = "UPDATE users SET is_business = NOT is_business WHERE id = $1 RETURNING *;"
        record = await self.conn.fetchrow(sql, user_id)
        return _to_user(record)

    async def delete(self, user_id: int) -> bool:
        deleted = await self.conn.fetchval("DELETE FROM users WHERE id = $1 RETURNING id;", user_id)
        return deleted is not None
