"""
MIS report API endpoints
"""
from typing import Optional

from fastapi import APIRouter, HTTPException

from core import reports

router = APIRouter()


@router.get("/commission")
def commission_report(
    agent: Optional[str] = None,
    product: Optional[str] = None,
    region: Optional[str] = None,
    status: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
):
    """Commission payout rows plus the summary cards for the current filters."""
    rows = reports.get_commission_payouts(
        agent=agent, product=product, region=region, status=status,
        start_date=start_date, end_date=end_date,
    )
    return {"success": True, "data": rows, "summary": reports.summarize_commissions(rows)}


@router.get("/retention")
def retention_report(
    agent: Optional[str] = None,
    status: Optional[str] = None,
    region: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
):
    rows = reports.get_retention_records(
        agent=agent, status=status, region=region, start_date=start_date, end_date=end_date,
    )
    return {"success": True, "data": rows, "summary": reports.summarize_retention(rows)}


@router.get("/{report}/options/{column}")
def filter_options(report: str, column: str):
    """Distinct values for a report filter dropdown."""
    table = {"commission": "commission_payouts", "retention": "retention_records"}.get(report)
    if table is None:
        raise HTTPException(status_code=404, detail=f"Unknown report: {report}")
    try:
        return {"success": True, "data": reports.list_filter_options(table, column)}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
