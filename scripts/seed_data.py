import argparse
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.core.constants import CHANGE_TYPE_MANUAL_COUNT
from app.core.logging import setup_logging
from app.database import Base, engine
from app.models import Drink, Inventory, InventoryHistory, Room, Tip, Transaction

logger = logging.getLogger(__name__)

ROOMS = ("Clubraum", "Saal", "Kegelbahn", "Terrasse")

# name, price, reduced price, color, opening stock
DRINKS = (
    ("Bier", 3.50, 3.00, "#f6ad55", 48),
    ("Radler", 3.50, 3.00, "#ecc94b", 24),
    ("Wein", 4.00, None, "#9b2c2c", 12),
    ("Cola", 2.50, 2.00, "#2d3748", 24),
    ("Wasser", 2.00, 1.50, "#63b3ed", 36),
)


def parse_args():
    parser = argparse.ArgumentParser(description="Create tables and seed rooms, drinks and stock.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    Base.metadata.create_all(bind=engine)

    with Session(engine) as db:
        if args.reset:
            for model in (InventoryHistory, Inventory, Tip, Transaction, Drink, Room):
                db.execute(delete(model))
            db.commit()

        if db.execute(select(Room.id).limit(1)).first():
            logger.info("Seed skipped: rooms already exist.")
            return

        db.add_all([Room(name=name) for name in ROOMS])

        drinks = []
        for position, (name, price, price_reduced, color, _stock) in enumerate(DRINKS, start=1):
            drinks.append(
                Drink(
                    name=name,
                    price=price,
                    price_reduced=price_reduced,
                    color=color,
                    sort_order=position,
                )
            )
        db.add_all(drinks)
        db.flush()

        db.add_all(
            [
                Inventory(drink_id=drink.id, quantity=stock)
                for drink, (_name, _price, _reduced, _color, stock) in zip(drinks, DRINKS)
            ]
        )
        db.add_all(
            [
                InventoryHistory(
                    drink_id=drink.id,
                    change_type=CHANGE_TYPE_MANUAL_COUNT,
                    quantity_before=0,
                    quantity_after=stock,
                    quantity_change=stock,
                    notes="Opening stock",
                )
                for drink, (_name, _price, _reduced, _color, stock) in zip(drinks, DRINKS)
            ]
        )
        db.commit()
        logger.info("Seeded %d rooms and %d drinks.", len(ROOMS), len(drinks))


if __name__ == "__main__":
    main()
