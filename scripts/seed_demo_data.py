#!/usr/bin/env python3
"""
Demo data seeder

Creates two users with one basket each, a small product catalog (one product
soft deleted while still sitting in a basket) and registers a session for the
first user in the Redis session registry.

Usage:
    python scripts/seed_demo_data.py

Then:
    curl http://localhost:3000/rest/basket/1 -H "Authorization: Bearer <printed token>"
"""

import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from redis.asyncio import Redis
from sqlalchemy import func, select

import config
from db import create_db_and_tables, get_db_session, session_commit, session_execute, session_flush
from models.basket import Basket
from models.basketItem import BasketItem
from models.principal import PrincipalDTO
from models.product import Product
from models.user import User
from services.session import SessionProvider

DEMO_PRODUCTS = [
    {"name": "Apple Juice (1000ml)", "description": "The all-time classic.", "price": 1.99, "deluxe_price": 0.99},
    {"name": "Orange Juice (1000ml)", "description": "Made from oranges hand-picked by Uncle Dittmeyer.", "price": 2.99, "deluxe_price": 2.49},
    {"name": "Banana Juice (1000ml)", "description": "Monkeys love it the most.", "price": 1.99, "deluxe_price": 1.99},
    {"name": "Melon Bike (Comeback-Product 2018 Edition)", "description": "The wheels of this bicycle are made from real water melons.", "price": 2999.0, "deluxe_price": 2999.0},
]


async def seed() -> PrincipalDTO | None:
    await create_db_and_tables()

    async with get_db_session() as session:
        existing = await session_execute(select(func.count(User.id)), session)
        if existing.scalar_one() > 0:
            print("✅ Database already contains users, nothing to seed")
            return None

        products = [Product(**data) for data in DEMO_PRODUCTS]
        session.add_all(products)

        alice = User(email="alice@example.com", username="alice")
        bob = User(email="bob@example.com", username="bob")
        session.add_all([alice, bob])
        await session_flush(session)

        alice_basket = Basket(user_id=alice.id)
        bob_basket = Basket(user_id=bob.id, coupon="WMNSDY2019")
        session.add_all([alice_basket, bob_basket])
        await session_flush(session)

        session.add_all([
            BasketItem(basket_id=alice_basket.id, product_id=products[0].id, quantity=2),
            BasketItem(basket_id=alice_basket.id, product_id=products[3].id, quantity=1),
            BasketItem(basket_id=bob_basket.id, product_id=products[1].id, quantity=3),
        ])

        # Retired product stays visible in alice's basket
        products[3].deleted_at = datetime.now(timezone.utc)

        await session_commit(session)
        print(f"📦 Seeded {len(products)} products, 2 users, baskets {alice_basket.id} and {bob_basket.id}")
        return PrincipalDTO(id=alice.id, email=alice.email, bid=alice_basket.id)


async def main():
    try:
        principal = await seed()
        if principal is None:
            return
        redis = Redis(host=config.REDIS_HOST, port=config.REDIS_PORT, password=config.REDIS_PASSWORD)
        try:
            provider = SessionProvider(redis, ttl_seconds=config.SESSION_TTL_SECONDS)
            token = await provider.create_session(principal)
        finally:
            await redis.aclose()
        print(f"🔑 Session token for user {principal.id} (basket {principal.bid}): {token}")
    except Exception as e:
        print(f"❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
