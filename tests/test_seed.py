import asyncio

from bizcards.core.security import verify_password
from bizcards.db.seed import SAMPLE_CARDS, SAMPLE_USERS, seed_database
from bizcards.repositories.memory import InMemoryCardRepository, InMemoryUserRepository, MemoryStore


def test_seed_runs_once():
    store = MemoryStore()
    users, cards = InMemoryUserRepository(store), InMemoryCardRepository(store)

    result = asyncio.run(seed_database(users, cards))
    assert result == {"skipped": False, "users": len(SAMPLE_USERS), "cards": len(SAMPLE_CARDS)}

    admin = asyncio.run(users.get_by_email("admin@admin.com"))
    assert admin["is_admin"] is True
    assert verify_password("Admin123!", admin["hashed_password"])

    margol = asyncio.run(users.get_by_email("margol@business.com"))
    assert len(asyncio.run(cards.list_by_user(margol["id"]))) == 2

    assert asyncio.run(seed_database(users, cards))["skipped"] is True
    assert asyncio.run(users.count()) == len(SAMPLE_USERS)
