CHANGE_TYPE_MANUAL_COUNT = "manual_count"
CHANGE_TYPE_ADJUSTMENT = "adjustment"

DEFAULT_COUNT_NOTE = "Manual inventory count"
DEFAULT_ADJUSTMENT_NOTE = "Manual adjustment"

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
