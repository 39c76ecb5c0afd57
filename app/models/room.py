from sqlalchemy import Column, Integer, String

from app.database.base import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)


__all__ = ["Room"]
