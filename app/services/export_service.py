from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from app.services.filters import StatisticsFilters

_HEADER_FONT = Font(bold=True)
_HEADER_FILL = PatternFill(start_color="E0E0E0", end_color="E0E0E0", fill_type="solid")
_TITLE_FONT = Font(size=14, bold=True)

_BREAKDOWN_COLUMNS = (
    ("Event", "event_name"),
    ("Room", "room_name"),
    ("Drink", "drink_name"),
    ("Quantity", "total_quantity"),
    ("Revenue", "total_revenue"),
    ("Storno quantity", "storno_quantity"),
    ("Storno revenue", "storno_revenue"),
)

_TIPS_COLUMNS = (
    ("Event", "event_name"),
    ("Room", "room_name"),
    ("Tips", "total_tips"),
)

_SUMMARY_LABELS = (
    ("Items sold", "total_items"),
    ("Revenue", "total_revenue"),
    ("Storno items", "storno_items"),
    ("Storno revenue", "storno_revenue"),
    ("Transactions", "transaction_count"),
    ("Tips", "total_tips"),
    ("Tip count", "tip_count"),
)


def _describe_filters(filters: StatisticsFilters) -> str:
    if filters.is_empty():
        return "All data"
    parts = []
    if filters.start_date is not None:
        parts.append("from {}".format(filters.start_date.isoformat()))
    if filters.end_date is not None:
        parts.append("to {}".format(filters.end_date.isoformat()))
    if filters.room_id is not None:
        parts.append("room {}".format(filters.room_id))
    if filters.event_name is not None:
        parts.append("event {}".format(filters.event_name))
    return ", ".join(parts)


def _write_table(ws, columns, rows, start_row=1):
    for col_idx, (label, _key) in enumerate(columns, start=1):
        cell = ws.cell(row=start_row, column=col_idx, value=label)
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL

    for row_idx, row in enumerate(rows, start=start_row + 1):
        for col_idx, (_label, key) in enumerate(columns, start=1):
            ws.cell(row=row_idx, column=col_idx, value=row.get(key))

    for col_idx, (label, key) in enumerate(columns, start=1):
        width = max([len(label)] + [len(str(row.get(key, ""))) for row in rows])
        ws.column_dimensions[get_column_letter(col_idx)].width = width + 2


def build_statistics_workbook(report: dict, filters: StatisticsFilters) -> bytes:
    wb = Workbook()

    ws = wb.active
    ws.title = "Summary"
    ws["A1"] = "Statistics"
    ws["A1"].font = _TITLE_FONT
    ws["A2"] = _describe_filters(filters)
    summary = report.get("summary", {})
    for offset, (label, key) in enumerate(_SUMMARY_LABELS):
        ws.cell(row=4 + offset, column=1, value=label).font = _HEADER_FONT
        ws.cell(row=4 + offset, column=2, value=summary.get(key, 0))
    ws.column_dimensions["A"].width = 20
    ws.column_dimensions["B"].width = 15

    _write_table(wb.create_sheet("Breakdown"), _BREAKDOWN_COLUMNS, report.get("statistics", []))
    _write_table(wb.create_sheet("Tips"), _TIPS_COLUMNS, report.get("tips_per_room", []))

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


__all__ = ["build_statistics_workbook"]
