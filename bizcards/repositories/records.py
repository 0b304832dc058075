"""Conversion between nested API-shaped dicts and flat table rows."""

from typing import Optional

ADDRESS_COLUMNS = ("state", "country", "city", "street", "house_number", "zip")


def flatten_image(image: Optional[dict]) -> tuple:
    image = image or {}
    return image.get("url"), image.get("alt")


def inflate_image(record) -> Optional[dict]:
    if record["image_url"] is None and record["image_alt"] is None:
        return None
    return {"url": record["image_url"], "alt": record["image_alt"]}


def flatten_address(address: dict) -> tuple:
    return tuple(address.get(column) for column in ADDRESS_COLUMNS)


def inflate_address(record) -> dict:
    return {column: record[column] for column in ADDRESS_COLUMNS}
