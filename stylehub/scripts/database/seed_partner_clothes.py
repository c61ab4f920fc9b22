# scripts/database/seed_partner_clothes.py
"""Seed a partner's catalogue with sample public items.

Usage:
    PYTHONPATH=stylehub python stylehub/scripts/database/seed_partner_clothes.py --partner <partner id>
"""

import argparse
import asyncio

from app.core.config import get_settings
from app.core.exceptions import NotFoundError
from app.core.logging import get_logger, setup_logging
from app.database.repositories.base import BaseRepository
from app.database.session import SessionManager, init_database
from app.models.database import Partner, PartnerCloth
from app.utils.validators import parse_id

logger = get_logger(__name__)

SAMPLE_CLOTHES = [
    {"name": "Blue Summer Dress", "color": "Blue", "category": "Dress", "brand": "StyleHub", "size": "M", "price": 1200},
    {"name": "Red Party Gown", "color": "Red", "category": "Gown", "brand": "StyleHub", "size": "S", "price": 4500},
    {"name": "Black Jacket", "color": "Black", "category": "Jacket", "brand": "StyleHub", "size": "L", "price": 2500},
]


async def seed_partner_clothes(database: SessionManager, partner_id: str) -> int:
    """Insert the sample items as public clothes owned by ``partner_id``."""
    partner_id = parse_id(partner_id)
    async with database.session() as session:
        if await session.get(Partner, partner_id) is None:
            raise NotFoundError("Partner not found")

        clothes = BaseRepository(PartnerCloth, session)
        for item in SAMPLE_CLOTHES:
            await clothes.create(owner_id=partner_id, visibility="public", **item)
        await session.commit()

    logger.info("Partner clothes seeded", partner_id=partner_id, count=len(SAMPLE_CLOTHES))
    return len(SAMPLE_CLOTHES)


async def main(partner_id: str):
    database = await init_database(get_settings())
    try:
        await seed_partner_clothes(database, partner_id)
    finally:
        await database.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--partner", required=True, help="Partner id that will own the items")
    args = parser.parse_args()
    setup_logging()
    asyncio.run(main(args.partner))
