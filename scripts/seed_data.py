#!/usr/bin/env python3
"""
Seed script: creates demo users, items and reviews directly through the repositories.
Items have no HTTP create endpoint, so this is how a fresh database gets a catalogue.
Run (tables must exist, e.g. `alembic upgrade head`):
  python scripts/seed_data.py
  python scripts/seed_data.py --items 20 --database-url sqlite+aiosqlite:///./dev.db
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import Settings, get_settings
from app.core.security import hash_password
from app.db.repositories import ItemRepository, ReviewRepository, UserRepository
from app.db.session import build_engine, build_session_maker

USERS = [
    ("admin", "admin@example.com"),
    ("testuser", "testuser@example.com"),
]
DEFAULT_PASSWORD = "password123"
CATEGORIES = ["Category A", "Category B", "Category C"]


async def seed(settings: Settings, item_count: int) -> None:
    engine = build_engine(settings)
    session_maker = build_session_maker(engine)
    try:
        async with session_maker() as session:
            user_repo = UserRepository(session)
            item_repo = ItemRepository(session)
            review_repo = ReviewRepository(session)

            users = []
            hashed = hash_password(DEFAULT_PASSWORD)
            for username, email in USERS:
                user = await user_repo.get_by_email(email)
                if user is None:
                    user = await user_repo.create(username=username, email=email, hashed_password=hashed)
                users.append(user)
            print(f"Users: {', '.join(u.username for u in users)} (password: {DEFAULT_PASSWORD})")

            for i in range(1, item_count + 1):
                item = await item_repo.create(
                    name=f"Item {i}",
                    description=f"Description for Item {i}",
                    category=CATEGORIES[(i - 1) % len(CATEGORIES)],
                )
                for n, user in enumerate(users, start=1):
                    await review_repo.create(
                        user_id=user.id,
                        item_id=item.id,
                        rating=random.randint(1, 5),
                        content=f"Review {n} for {item.name}",
                    )
            await session.commit()
            print(f"Items: {item_count}, reviews: {item_count * len(users)}")
    finally:
        await engine.dispose()


def main():
    ap = argparse.ArgumentParser(description="Seed users, items and reviews")
    ap.add_argument("--items", type=int, default=5, help="Number of items to create")
    ap.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    args = ap.parse_args()

    settings = get_settings()
    if args.database_url:
        settings = settings.model_copy(update={"database_url": args.database_url})
    asyncio.run(seed(settings, args.items))
    print("Database has been seeded.")


if __name__ == "__main__":
    main()
