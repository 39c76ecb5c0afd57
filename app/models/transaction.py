from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, false, func

from app.database.base import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    drink_id = Column(Integer, ForeignKey("drinks.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    event_name = Column(String, nullable=False)

    # Cancellations are new rows, never updates of the original.
    is_storno = Column(Boolean, nullable=False, server_default=false())
    timestamp = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_transactions_timestamp", "timestamp"),
        Index("idx_transactions_event", "event_name"),
        Index("idx_transactions_room", "room_id"),
    )


__all__ = ["Transaction"]
