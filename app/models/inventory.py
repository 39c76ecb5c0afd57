from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, func

from app.database.base import Base


class Inventory(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True)
    drink_id = Column(Integer, ForeignKey("drinks.id"), nullable=False, unique=True)

    quantity = Column(Integer, nullable=False, server_default="0")
    last_count_date = Column(DateTime)
    last_updated = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )


__all__ = ["Inventory"]
