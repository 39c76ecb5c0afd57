from datetime import date
from typing import Optional

from fastapi import Query, Request

from app.config import get_settings
from app.core.dates import parse_date
from app.core.errors import InvalidInput
from app.core.security import require_admin_password
from app.database.executor import QueryExecutor
from app.services.filters import StatisticsFilters


def get_executor(request: Request) -> QueryExecutor:
    return request.app.state.executor


def require_admin(request: Request) -> None:
    header_name = get_settings().ADMIN_PASSWORD_HEADER
    require_admin_password(request.headers.get(header_name))


def _query_date(name: str, value: Optional[str]) -> Optional[date]:
    try:
        return parse_date(value)
    except ValueError as exc:
        raise InvalidInput("{} must be an ISO date (YYYY-MM-DD).".format(name)) from exc


def statistics_filters(
    start_date: Optional[str] = Query(None, description="First day, inclusive (YYYY-MM-DD)"),
    end_date: Optional[str] = Query(None, description="Last day, inclusive (YYYY-MM-DD)"),
    room_id: Optional[str] = Query(None, description="Room id"),
    event_name: Optional[str] = Query(None, description="Exact event name"),
) -> StatisticsFilters:
    room_value = None
    if room_id is not None and room_id.strip():
        try:
            room_value = int(room_id)
        except ValueError as exc:
            raise InvalidInput("room_id must be an integer.") from exc

    event_value = event_name.strip() if event_name else None
    return StatisticsFilters(
        start_date=_query_date("start_date", start_date),
        end_date=_query_date("end_date", end_date),
        room_id=room_value,
        event_name=event_value or None,
    )


__all__ = ["get_executor", "require_admin", "statistics_filters"]
