"""
Main App Entry Point
====================
Streamlit multipage application with navigation
"""

import streamlit as st
from dotenv import load_dotenv

from db_setup.init_db import init_database

# Load environment variables
load_dotenv()

# Configure the main page
st.set_page_config(
    page_title="Insurance Back-Office",
    page_icon="🏢",
    layout="wide",
    initial_sidebar_state="expanded"
)

init_database()

# Main page content
st.title("🏢 Insurance Back-Office")
st.markdown("Administration console for master data, MIS reports, agent training and bulk imports.")

st.info("""
**Available Pages:**
- 🗂️ **Master Data** - Zones, NCB and depreciation slabs, states, pincodes and business masters
- 📊 **Reports** - Commission payout and customer retention reports
- 🎓 **Training** - LMS training modules and issued certificates
- 📤 **Bulk Upload** - Import policies, claims, customers and leads from Excel or CSV

Use the sidebar to navigate between pages.
""")

st.markdown("---")
st.markdown("**Quick Actions:**")

col1, col2, col3, col4 = st.columns(4)

with col1:
    st.markdown("### 🗂️ Masters")
    if st.button("Master Data", use_container_width=True):
        st.switch_page("pages/master_data.py")

with col2:
    st.markdown("### 📊 Reports")
    if st.button("MIS Reports", use_container_width=True):
        st.switch_page("pages/reports.py")

with col3:
    st.markdown("### 🎓 Training")
    if st.button("Training & Certificates", use_container_width=True):
        st.switch_page("pages/training.py")

with col4:
    st.markdown("### 📤 Upload")
    if st.button("Bulk Upload", use_container_width=True):
        st.switch_page("pages/bulk_upload.py")
