from sqlalchemy import Boolean, Column, Integer, Numeric, String, true

from app.database.base import Base


class Drink(Base):
    __tablename__ = "drinks"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)

    price = Column(Numeric(10, 2), nullable=False)
    price_reduced = Column(Numeric(10, 2))
    color = Column(String, nullable=False, server_default="#667eea")

    # Drinks referenced by transactions are deactivated, never deleted.
    active = Column(Boolean, nullable=False, server_default=true())
    sort_order = Column(Integer, nullable=False, server_default="0")


__all__ = ["Drink"]
