"""
Bulk Upload Page Module
=======================
Spreadsheet import for policies, claims, customers and leads
"""

import asyncio

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from core import bulk_upload

# Load environment variables
load_dotenv()


def render_result(result: dict):
    """Processing report for one upload"""
    col1, col2, col3 = st.columns(3)
    col1.metric("Processed", result["recordsProcessed"])
    col2.metric("Successful", result["recordsSuccessful"])
    col3.metric("Failed", result["recordsFailed"])

    if result["errors"]:
        with st.expander(f"⚠️ {len(result['errors'])} row errors", expanded=True):
            for error in result["errors"]:
                st.markdown(f"- {error}")


def render_history():
    uploads = bulk_upload.list_uploads()
    if not uploads:
        st.info("No uploads yet.")
        return

    df = pd.DataFrame(uploads)
    df["created_at"] = pd.to_datetime(df["created_at"]).dt.strftime("%Y-%m-%d %H:%M")
    df["errors"] = df["errors"].apply(len)
    st.dataframe(
        df,
        column_config={
            "id": None,
            "upload_type": st.column_config.TextColumn("Type", width="small"),
            "filename": st.column_config.TextColumn("File", width="large"),
            "file_size": st.column_config.NumberColumn("Bytes"),
            "records_processed": st.column_config.NumberColumn("Processed"),
            "records_successful": st.column_config.NumberColumn("Successful"),
            "records_failed": st.column_config.NumberColumn("Failed"),
            "errors": st.column_config.NumberColumn("Errors"),
            "created_at": st.column_config.TextColumn("Uploaded"),
        },
        hide_index=True,
        use_container_width=True,
    )


def render():
    """Main render function for the bulk upload page"""
    st.title("📤 Bulk Upload")

    upload_type = st.selectbox(
        "Upload type",
        bulk_upload.UPLOAD_TYPES,
        format_func=lambda x: x.title(),
        key="bulk_upload_type",
    )
    uploaded = st.file_uploader(
        "Excel or CSV file (max 10MB)",
        type=[ext.lstrip(".") for ext in bulk_upload.ALLOWED_EXTENSIONS],
        key="bulk_upload_file",
    )

    if st.button("Upload", type="primary", disabled=uploaded is None):
        content = uploaded.getvalue()
        try:
            bulk_upload.validate_upload(uploaded.name, len(content), upload_type)
        except bulk_upload.BulkUploadError as e:
            st.error(str(e))
        else:
            with st.spinner("Processing file..."):
                result = asyncio.run(bulk_upload.process_bulk_upload(upload_type))
            bulk_upload.record_upload(upload_type, uploaded.name, len(content), result)
            st.success(f"{upload_type} bulk upload completed successfully")
            render_result(result)

    st.divider()
    st.subheader("Recent Uploads")
    render_history()


# Entry point for backwards compatibility
if __name__ == "__main__":
    st.set_page_config(page_title="Bulk Upload", page_icon="📤", layout="wide")
    render()
