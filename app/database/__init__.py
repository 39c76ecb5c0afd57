from app.database.base import Base
from app.database.engine import build_engine, engine
from app.database.executor import QueryExecutor

__all__ = ["Base", "QueryExecutor", "build_engine", "engine"]
