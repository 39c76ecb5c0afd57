from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.core.constants import XLSX_MEDIA_TYPE
from app.database.executor import QueryExecutor
from app.dependencies import get_executor, statistics_filters
from app.schemas.statistics import StatisticsReport
from app.services.export_service import build_statistics_workbook
from app.services.filters import StatisticsFilters
from app.services.statistics_service import get_statistics

router = APIRouter(prefix="/api/statistics", tags=["Statistics"])


@router.get("", response_model=StatisticsReport)
def statistics(
    filters: StatisticsFilters = Depends(statistics_filters),
    executor: QueryExecutor = Depends(get_executor),
):
    return get_statistics(executor, filters)


@router.get("/export")
def export_statistics(
    filters: StatisticsFilters = Depends(statistics_filters),
    executor: QueryExecutor = Depends(get_executor),
):
    report = get_statistics(executor, filters)
    content = build_statistics_workbook(report, filters)
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="statistics.xlsx"'},
    )


__all__ = ["router"]
