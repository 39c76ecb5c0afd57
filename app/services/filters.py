from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Optional

# (template, parameter name); templates are rendered with the table alias.
_START_DATE = ("DATE({alias}.timestamp) >= :start_date", "start_date")
_END_DATE = ("DATE({alias}.timestamp) <= :end_date", "end_date")
_ROOM_ID = ("{alias}.room_id = :room_id", "room_id")
_EVENT_NAME = ("{alias}.event_name = :event_name", "event_name")


@dataclass(frozen=True)
class StatisticsFilters:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    room_id: Optional[int] = None
    event_name: Optional[str] = None

    def date_range(self) -> StatisticsFilters:
        return StatisticsFilters(start_date=self.start_date, end_date=self.end_date)

    def is_empty(self) -> bool:
        return (
            self.start_date is None
            and self.end_date is None
            and self.room_id is None
            and self.event_name is None
        )


@dataclass(frozen=True)
class FilterClause:
    """A WHERE predicate plus its bound parameters, rendered for one alias.

    ``params`` lists ``(name, value)`` pairs in placeholder order; ``for_alias``
    reuses them untouched for another table.
    """

    templates: tuple[str, ...]
    params: tuple[tuple[str, Any], ...]
    alias: str

    @property
    def expression(self) -> str:
        if not self.templates:
            return "1=1"
        return " AND ".join(template.format(alias=self.alias) for template in self.templates)

    def for_alias(self, alias: str) -> FilterClause:
        return replace(self, alias=alias)

    def bind_params(self) -> dict[str, Any]:
        return dict(self.params)


def build_filter(filters: StatisticsFilters, alias: str) -> FilterClause:
    templates = []
    params = []

    def add(predicate, value):
        template, name = predicate
        templates.append(template)
        params.append((name, value))

    if filters.start_date is not None:
        add(_START_DATE, filters.start_date.isoformat())
    if filters.end_date is not None:
        add(_END_DATE, filters.end_date.isoformat())
    if filters.room_id is not None:
        add(_ROOM_ID, filters.room_id)
    if filters.event_name is not None:
        add(_EVENT_NAME, filters.event_name)

    return FilterClause(templates=tuple(templates), params=tuple(params), alias=alias)


__all__ = ["FilterClause", "StatisticsFilters", "build_filter"]
