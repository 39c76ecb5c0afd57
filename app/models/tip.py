from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String, func

from app.database.base import Base


class Tip(Base):
    __tablename__ = "tips"

    id = Column(Integer, primary_key=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)

    amount = Column(Numeric(10, 2), nullable=False)
    event_name = Column(String, nullable=False)
    timestamp = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_tips_timestamp", "timestamp"),
    )


__all__ = ["Tip"]
