# bizcards/db/seed.py
import argparse
import asyncio
import logging
import random

from faker import Faker
from tqdm import tqdm

from bizcards.core.security import hash_password
from bizcards.db.session import close_db_pool, connect_db_pool, get_pool
from bizcards.repositories.card_repo import CardRepository, DuplicateBizNumberError
from bizcards.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {
        "name": {"first": "Avi", "middle": "", "last": "Bitter"},
        "phone": "0521234567",
        "email": "avi@gmail.com",
        "password": "Password123!",
        "image": {
            "url": "https://pics.craiyon.com/2023-11-05/c2d45408dd0848a0a6366c1dd75e9e22.webp",
            "alt": "Avi at the beach",
        },
        "address": {
            "state": "Merkaz", "country": "Israel", "city": "Tel Aviv",
            "street": "Rotshild Street", "house_number": 5, "zip": 12345,
        },
        "is_business": False,
        "is_admin": False,
    },
    {
        "name": {"first": "Margol", "middle": "Noa", "last": "Fisher"},
        "phone": "0527654321",
        "email": "margol@business.com",
        "password": "Business123!",
        "image": {
            "url": "https://media.craiyon.com/2025-10-04/GaiyJ_ocSYOuvlMDf6Jr9Q.webp",
            "alt": "Margol at the forest",
        },
        "address": {
            "state": "Ha Tzafon", "country": "Israel", "city": "Haifa",
            "street": "Hertzl Street", "house_number": 90, "zip": 10001,
        },
        "is_business": True,
        "is_admin": False,
    },
    {
        "name": {"first": "Admin", "middle": "", "last": "User"},
        "phone": "0529999999",
        "email": "admin@admin.com",
        "password": "Admin123!",
        "image": {
            "url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=400",
            "alt": "Admin user profile picture",
        },
        "address": {
            "state": "Ha Darom", "country": "Israel", "city": "Beer-Sheva",
            "street": "Admin Avenue", "house_number": 789, "zip": 73301,
        },
        "is_business": True,
        "is_admin": True,
    },
]

# (owner email, card)
SAMPLE_CARDS = [
    ("margol@business.com", {
        "title": "Tech Solutions Pro",
        "subtitle": "Professional IT Services",
        "description": "We provide comprehensive IT solutions for businesses of all sizes. "
                       "From web development to cloud services.",
        "phone": "0527654321",
        "email": "margol@business.com",
        "web": "https://margolBusiness.com",
        "image": {
            "url": "https://media.craiyon.com/2025-09-25/WUnPDqp5TAe0ggEFAj1X2A.webp",
            "alt": "Tech Solutions Pro office",
        },
        "address": {
            "state": "Merkaz", "country": "Israel", "city": "Tel Aviv",
            "street": "Moshe Dayan", "house_number": 83, "zip": 10001,
        },
        "biz_number": 1000001,
    }),
    ("admin@admin.com", {
        "title": "Creative Design Studio",
        "subtitle": "Graphic Design & Branding",
        "description": "Award-winning design studio specializing in brand identity, web design, "
                       "and marketing materials.",
        "phone": "0529999999",
        "email": "admin@admin.com",
        "web": "https://creativedesignstudio.com",
        "image": {
            "url": "https://images.unsplash.com/photo-1558655146-d09347e92766?w=400",
            "alt": "Creative Design Studio workspace",
        },
        "address": {
            "state": "Ha Darom", "country": "Israel", "city": "Arad",
            "street": "Admin street", "house_number": 6, "zip": 73301,
        },
        "biz_number": 1000002,
    }),
    ("margol@business.com", {
        "title": "Digital Marketing Hub",
        "subtitle": "Online Marketing Solutions",
        "description": "Full-service digital marketing agency helping businesses grow their online "
                       "presence through SEO, social media, and PPC advertising.",
        "phone": "0521111111",
        "email": "info@digitalmarketinghub.com",
        "web": "https://digitalmarketinghub.com",
        "image": {
            "url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=400",
            "alt": "Digital Marketing Hub team",
        },
        "address": {
            "state": "Ha Tzafon", "country": "Israel", "city": "Nesher",
            "street": "First street", "house_number": 8, "zip": 33101,
        },
        "biz_number": 1000003,
    }),
]


async def seed_database(user_repo, card_repo) -> dict:
    """Insert the sample users and cards unless the store already has users."""
    if await user_repo.count() > 0:
        logger.info("Test data already exists, skipping seed")
        return {"skipped": True, "users": 0, "cards": 0}

    user_ids = {}
    for sample in SAMPLE_USERS:
        user_in = {key: value for key, value in sample.items() if key != "password"}
        user_in["hashed_password"] = hash_password(sample["password"])
        user = await user_repo.create(user_in)
        user_ids[user["email"]] = user["id"]

    for owner_email, card_in in SAMPLE_CARDS:
        await card_repo.create(user_ids[owner_email], card_in)

    logger.info("Seeded %d users and %d cards", len(SAMPLE_USERS), len(SAMPLE_CARDS))
    return {"skipped": False, "users": len(SAMPLE_USERS), "cards": len(SAMPLE_CARDS)}


def fake_card(fake: Faker) -> dict:
    company = fake.company()
    return {
        "title": company[:256],
        "subtitle": fake.catch_phrase()[:256],
        "description": fake.paragraph(nb_sentences=3)[:1024],
        "phone": f"05{random.randint(10000000, 99999999)}",
        "email": fake.company_email(),
        "web": f"https://www.{fake.domain_name()}",
        "image": {"url": fake.image_url(), "alt": f"{company} logo"[:256]},
        "address": {
            "state": fake.state(),
            "country": fake.country()[:256],
            "city": fake.city(),
            "street": fake.street_name(),
            "house_number": random.randint(1, 999),
            "zip": random.randint(10000, 99999),
        },
        "biz_number": random.randint(1_000_000, 9_999_999),
    }


async def add_fake_cards(user_repo, card_repo, count: int) -> int:
    """Attach ``count`` generated cards to the first business user."""
    owners = [u for u in await user_repo.list_all() if u["is_business"]]
    if not owners:
        raise RuntimeError("No business user to own the generated cards, run the seed first")

    fake = Faker()
    created = 0
    for _ in tqdm(range(count), desc="Generating cards"):
        card_in = fake_card(fake)
        if await card_repo.get_by_biz_number(card_in["biz_number"]):
            continue
        try:
            await card_repo.create(random.choice(owners)["id"], card_in)
        except DuplicateBizNumberError:
            continue
        created += 1
    return created


async def seed(fake_cards: int = 0):
    await connect_db_pool()
    pool = await get_pool()
    if pool is None:
        raise RuntimeError("Database pool could not be initialized")

    try:
        async with pool.acquire() as conn:
            user_repo, card_repo = UserRepository(conn), CardRepository(conn)
            result = await seed_database(user_repo, card_repo)
            logger.info("Seed result: %s", result)
            if fake_cards:
                created = await add_fake_cards(user_repo, card_repo, fake_cards)
                logger.info("Generated %d fake cards", created)
    finally:
        await close_db_pool()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Seed the business cards database")
    parser.add_argument("--fake-cards", type=int, default=0,
                        help="number of Faker-generated cards to add")
    args = parser.parse_args()
    asyncio.run(seed(args.fake_cards))
