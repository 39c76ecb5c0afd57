from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, func

from app.database.base import Base


class InventoryHistory(Base):
    __tablename__ = "inventory_history"

    id = Column(Integer, primary_key=True)
    drink_id = Column(Integer, ForeignKey("drinks.id"), nullable=False)

    change_type = Column(String, nullable=False)
    quantity_before = Column(Integer, nullable=False)
    quantity_after = Column(Integer, nullable=False)
    quantity_change = Column(Integer, nullable=False)
    notes = Column(String)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "change_type IN ('manual_count', 'adjustment')",
            name="ck_inventory_history_change_type",
        ),
        Index("idx_inventory_history_drink", "drink_id", "created_at"),
    )


__all__ = ["InventoryHistory"]
