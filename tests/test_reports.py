"""
Tests for the commission payout and customer retention reports
"""
import pytest

from core import reports


def test_commission_summary_for_all_rows():
    rows = reports.get_commission_payouts()
    summary = reports.summarize_commissions(rows)

    assert len(rows) == 8
    assert summary["total_commission"] == 730000
    assert summary["paid_commission"] == 572500
    assert summary["pending_commission"] == 75000
    assert summary["overdue_commission"] == 82500
    assert summary["total_premium"] == 14600000
    assert summary["total_policies"] == 304
    assert summary["status_counts"] == {"paid": 6, "pending": 1, "overdue": 1}
    assert summary["top_earner"]["agent_name"] == "Rohit Verma"
    assert summary["commission_by_product"]["Life Insurance"] == 375000


def test_commission_filters():
    assert len(reports.get_commission_payouts(product="Health Insurance")) == 3
    assert len(reports.get_commission_payouts(status="all", region="")) == 8
    assert len(reports.get_commission_payouts(agent="Amit Patel", status="paid")) == 1


def test_date_range_needs_both_ends():
    assert len(reports.get_commission_payouts(start_date="2024-01-14", end_date="2024-01-15")) == 5
    assert len(reports.get_commission_payouts(start_date="2024-01-14")) == 8


def test_empty_commission_summary():
    summary = reports.summarize_commissions([])
    assert summary["total_commission"] == 0
    assert summary["top_earner"] is None


def test_retention_summary():
    summary = reports.summarize_retention(reports.get_retention_records())
    assert summary["total_customers"] == 8
    assert summary["status_counts"] == {"active": 3, "renewed": 3, "lapsed": 1, "cancelled": 1}
    assert summary["average_retention_rate"] == 85.4
    assert summary["retained_share"] == 75.0
    assert summary["total_premium"] == 360000


def test_retention_filters():
    assert len(reports.get_retention_records(status="renewed")) == 3
    assert len(reports.get_retention_records(start_date="2021-01-01", end_date="2021-12-31")) == 2


def test_empty_retention_summary():
    summary = reports.summarize_retention([])
    assert summary["average_retention_rate"] == 0
    assert summary["retained_share"] == 0.0


def test_percentage_and_inr_format():
    assert reports.percentage(1, 0) == 0.0
    assert reports.percentage(1, 3) == 33.33
    assert reports.format_inr(730000) == "₹7.3L"
    assert reports.format_inr(47500) == "₹48K"
    assert reports.format_inr(900) == "₹900"


def test_filter_options():
    assert reports.list_filter_options("commission_payouts", "status") == ["overdue", "paid", "pending"]
    with pytest.raises(ValueError):
        reports.list_filter_options("commission_payouts", "premium")


def test_api_commission(client):
    body = client.get("/api/reports/commission", params={"region": "Mumbai"}).json()
    assert body["success"] is True
    assert len(body["data"]) == 1
    assert body["summary"]["total_commission"] == 125000


def test_api_retention(client):
    body = client.get("/api/reports/retention", params={"agent": "all"}).json()
    assert body["summary"]["total_customers"] == 8


def test_api_filter_options(client):
    body = client.get("/api/reports/retention/options/region").json()
    assert len(body["data"]) == 8
    assert client.get("/api/reports/sales/options/region").status_code == 404
    assert client.get("/api/reports/commission/options/premium").status_code == 400
