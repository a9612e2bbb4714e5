"""
MIS Reports Module

Data and summary figures behind the MIS report dashboards:
- Commission payout report (revenue)
- Customer retention report

Row fetchers apply the dashboard filters in SQL; the summarize_* functions
turn the filtered rows into the figures shown on the summary cards and
charts.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import text

from core.db import get_conn

COMMISSION_STATUSES = ("paid", "pending", "overdue")
RETENTION_STATUSES = ("active", "renewed", "lapsed", "cancelled")


def percentage(part: float, whole: float) -> float:
    """part / whole as a percentage, 0.0 when whole is 0."""
    if not whole:
        return 0.0
    return round(part / whole * 100, 2)


def format_inr(amount: float) -> str:
    """Compact rupee display: ₹12.5L, ₹47K, ₹900."""
    if amount >= 100000:
        return f"₹{amount / 100000:.1f}L"
    if amount >= 1000:
        return f"₹{amount / 1000:.0f}K"
    return f"₹{amount:.0f}"


def _is_set(value: Optional[str]) -> bool:
    return value not in (None, "", "all", "ALL")


def _build_filters(equality: dict, date_column: str, start_date: Optional[str],
                   end_date: Optional[str]) -> tuple[str, dict]:
    conditions = []
    params = {}
    for column, value in equality.items():
        if _is_set(value):
            conditions.append(f"{column} = :{column}")
            params[column] = value

    # Date range only applies once both ends are chosen
    if start_date and end_date:
        conditions.append(f"{date_column} >= :start_date AND {date_column} <= :end_date")
        params["start_date"] = str(start_date)
        params["end_date"] = str(end_date)

    return (" AND ".join(conditions) if conditions else "1 = 1"), params


# ─────────────────────────────────────────────────────────────
# Commission payout report
# ─────────────────────────────────────────────────────────────

def get_commission_payouts(
    agent: str = None,
    product: str = None,
    region: str = None,
    status: str = None,
    start_date: str = None,
    end_date: str = None,
) -> list[dict]:
    """
    Commission payout rows matching the dashboard filters.

    "all" or an empty value disables a filter. The payout date range is
    inclusive and only applied when both start_date and end_date are given.
    """
    where_clause, params = _build_filters(
        {"agent_name": agent, "product": product, "region": region, "status": status},
        "payout_date", start_date, end_date,
    )
    with get_conn() as conn:
        result = conn.execute(text(f"""
            SELECT id, agent_name, product, region, premium, commission_rate, commission,
                   payout_date, status, policy_count, month
            FROM commission_payouts
            WHERE {where_clause}
            ORDER BY payout_date DESC, agent_name
        """), params)
        return [dict(row._mapping) for row in result.fetchall()]


def summarize_commissions(rows: list[dict]) -> dict:
    """
    Summary cards and chart series for the commission report.

    Returns:
        {
            "total_commission": float,
            "paid_commission": float,
            "pending_commission": float,
            "overdue_commission": float,
            "total_premium": float,
            "total_policies": int,
            "status_counts": {"paid": int, "pending": int, "overdue": int},
            "commission_by_product": {product: float},
            "top_earner": dict | None,
        }
    """
    by_status = {status: 0.0 for status in COMMISSION_STATUSES}
    status_counts = {status: 0 for status in COMMISSION_STATUSES}
    by_product: dict[str, float] = {}
    top_earner = None

    for row in rows:
        commission = float(row["commission"] or 0)
        status = row["status"]
        if status in by_status:
            by_status[status] += commission
            status_counts[status] += 1
        by_product[row["product"]] = by_product.get(row["product"], 0.0) + commission
        # strict > keeps the first row on ties
        if top_earner is None or commission > float(top_earner["commission"] or 0):
            top_earner = row

    return {
        "total_commission": sum(float(r["commission"] or 0) for r in rows),
        "paid_commission": by_status["paid"],
        "pending_commission": by_status["pending"],
        "overdue_commission": by_status["overdue"],
        "total_premium": sum(float(r["premium"] or 0) for r in rows),
        "total_policies": sum(int(r["policy_count"] or 0) for r in rows),
        "status_counts": status_counts,
        "commission_by_product": by_product,
        "top_earner": top_earner,
    }


# ─────────────────────────────────────────────────────────────
# Retention report
# ─────────────────────────────────────────────────────────────

def get_retention_records(
    agent: str = None,
    status: str = None,
    region: str = None,
    start_date: str = None,
    end_date: str = None,
) -> list[dict]:
    """Retention rows matching the dashboard filters (date range on join_date)."""
    where_clause, params = _build_filters(
        {"agent_name": agent, "status": status, "region": region},
        "join_date", start_date, end_date,
    )
    with get_conn() as conn:
        result = conn.execute(text(f"""
            SELECT id, customer_name, agent_name, policy_type, join_date, last_renewal_date,
                   status, region, premium, retention_rate, years_with_company
            FROM retention_records
            WHERE {where_clause}
            ORDER BY join_date
        """), params)
        return [dict(row._mapping) for row in result.fetchall()]


def summarize_retention(rows: list[dict]) -> dict:
    status_counts = {status: 0 for status in RETENTION_STATUSES}
    by_policy_type: dict[str, int] = {}

    for row in rows:
        if row["status"] in status_counts:
            status_counts[row["status"]] += 1
        by_policy_type[row["policy_type"]] = by_policy_type.get(row["policy_type"], 0) + 1

    average_rate = (
        round(sum(float(r["retention_rate"] or 0) for r in rows) / len(rows), 1) if rows else 0
    )

    return {
        "total_customers": len(rows),
        "active": status_counts["active"],
        "renewed": status_counts["renewed"],
        "lapsed": status_counts["lapsed"],
        "cancelled": status_counts["cancelled"],
        "status_counts": status_counts,
        "average_retention_rate": average_rate,
        "retained_share": percentage(status_counts["active"] + status_counts["renewed"], len(rows)),
        "customers_by_policy_type": by_policy_type,
        "total_premium": sum(float(r["premium"] or 0) for r in rows),
    }


def list_filter_options(table: str, column: str) -> list[str]:
    """Distinct values for a report dropdown."""
    allowed = {
        "commission_payouts": ("agent_name", "product", "region", "status"),
        "retention_records": ("agent_name", "region", "status", "policy_type"),
    }
    if column not in allowed.get(table, ()):
        raise ValueError(f"No filter options for {table}.{column}")

    with get_conn() as conn:
        result = conn.execute(text(f"SELECT DISTINCT {column} FROM {table} ORDER BY {column}"))
        return [row[0] for row in result.fetchall()]
