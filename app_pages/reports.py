"""
Reports Page Module
===================
Commission payout and customer retention MIS reports
"""

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from core import reports

# Load environment variables
load_dotenv()


def _filter_select(label: str, table: str, column: str, key: str) -> str:
    options = ["all", *reports.list_filter_options(table, column)]
    return st.selectbox(label, options, format_func=lambda x: "All" if x == "all" else x, key=key)


def _date_range(key: str):
    col1, col2 = st.columns(2)
    with col1:
        start = st.date_input("From", value=None, key=f"{key}_start")
    with col2:
        end = st.date_input("To", value=None, key=f"{key}_end")
    return (start.isoformat() if start else None), (end.isoformat() if end else None)


def render_commission_report():
    """Commission payouts by agent, product and status"""
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        agent = _filter_select("Agent", "commission_payouts", "agent_name", "comm_agent")
    with col2:
        product = _filter_select("Product", "commission_payouts", "product", "comm_product")
    with col3:
        region = _filter_select("Region", "commission_payouts", "region", "comm_region")
    with col4:
        status = _filter_select("Status", "commission_payouts", "status", "comm_status")
    start_date, end_date = _date_range("comm")

    rows = reports.get_commission_payouts(
        agent=agent, product=product, region=region, status=status,
        start_date=start_date, end_date=end_date,
    )
    summary = reports.summarize_commissions(rows)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Commission", reports.format_inr(summary["total_commission"]))
    col2.metric("Paid", reports.format_inr(summary["paid_commission"]))
    col3.metric("Pending", reports.format_inr(summary["pending_commission"]))
    col4.metric("Overdue", reports.format_inr(summary["overdue_commission"]))

    if not rows:
        st.info("No commission payouts match the selected filters.")
        return

    if summary["top_earner"]:
        top = summary["top_earner"]
        st.caption(f"🏆 Top earner: **{top['agent_name']}** ({reports.format_inr(top['commission'])})")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Commission by Product**")
        st.bar_chart(pd.Series(summary["commission_by_product"], name="commission"))
    with col2:
        st.markdown("**Payouts by Status**")
        st.bar_chart(pd.Series(summary["status_counts"], name="payouts"))

    df = pd.DataFrame(rows)
    st.dataframe(
        df,
        column_config={
            "id": None,
            "agent_name": st.column_config.TextColumn("Agent", width="medium"),
            "premium": st.column_config.NumberColumn("Premium", format="₹%d"),
            "commission_rate": st.column_config.NumberColumn("Rate", format="%.1f%%"),
            "commission": st.column_config.NumberColumn("Commission", format="₹%d"),
            "policy_count": st.column_config.NumberColumn("Policies", width="small"),
        },
        hide_index=True,
        use_container_width=True,
    )
    st.download_button("⬇️ Export CSV", df.to_csv(index=False), "commission_report.csv", "text/csv")


def render_retention_report():
    """Customer retention by agent, region and status"""
    col1, col2, col3 = st.columns(3)
    with col1:
        agent = _filter_select("Agent", "retention_records", "agent_name", "ret_agent")
    with col2:
        status = _filter_select("Status", "retention_records", "status", "ret_status")
    with col3:
        region = _filter_select("Region", "retention_records", "region", "ret_region")
    start_date, end_date = _date_range("ret")

    rows = reports.get_retention_records(
        agent=agent, status=status, region=region, start_date=start_date, end_date=end_date,
    )
    summary = reports.summarize_retention(rows)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Customers", summary["total_customers"])
    col2.metric("Avg Retention", f"{summary['average_retention_rate']}%")
    col3.metric("Retained", f"{summary['retained_share']}%")
    col4.metric("Premium", reports.format_inr(summary["total_premium"]))

    if not rows:
        st.info("No customers match the selected filters.")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Customers by Status**")
        st.bar_chart(pd.Series(summary["status_counts"], name="customers"))
    with col2:
        st.markdown("**Customers by Policy Type**")
        st.bar_chart(pd.Series(summary["customers_by_policy_type"], name="customers"))

    df = pd.DataFrame(rows)
    st.dataframe(
        df,
        column_config={
            "id": None,
            "customer_name": st.column_config.TextColumn("Customer", width="medium"),
            "premium": st.column_config.NumberColumn("Premium", format="₹%d"),
            "retention_rate": st.column_config.ProgressColumn(
                "Retention", min_value=0, max_value=100, format="%d%%"
            ),
        },
        hide_index=True,
        use_container_width=True,
    )
    st.download_button("⬇️ Export CSV", df.to_csv(index=False), "retention_report.csv", "text/csv")


def render():
    """Main render function for the reports page"""
    st.title("📊 MIS Reports")

    tab1, tab2 = st.tabs(["💰 Commission Payouts", "🔁 Customer Retention"])
    with tab1:
        render_commission_report()
    with tab2:
        render_retention_report()


# Entry point for backwards compatibility
if __name__ == "__main__":
    st.set_page_config(page_title="Reports", page_icon="📊", layout="wide")
    render()
