from datetime import date, datetime


def parse_date(value):
    """Return a ``date`` for query input, ``None`` when blank.

    Raises ``ValueError`` for text that is not an ISO date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value_text = str(value).strip()
    if not value_text:
        return None
    return date.fromisoformat(value_text[:10])
