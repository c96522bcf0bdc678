# product_service/data/seed.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from product_service.data.models.product import ProductModel
from product_service.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {"name": "Keyboard", "description": "Mechanical keyboard", "price": 199.99},
    {"name": "Mouse", "description": "Wireless mouse", "price": 49.50},
    {"name": "Monitor", "description": "27 inch monitor", "price": 899.00},
]


def seed(db: Session) -> int:
    # not forcing: only seed if empty
    if db.scalars(select(ProductModel).limit(1)).first() is not None:
        logger.info("Products table not empty, skipping seed")
        return 0

    db.add_all([ProductModel(**data) for data in DEMO_PRODUCTS])
    db.commit()
    logger.info(f"Seeded {len(DEMO_PRODUCTS)} demo products")
    return len(DEMO_PRODUCTS)
