"""
Bulk Upload Page
================
Bulk upload page for Streamlit multipage app
"""

import streamlit as st
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import the bulk_upload functionality
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from app_pages.bulk_upload import render
from db_setup.init_db import init_database

# Set page config for this page
st.set_page_config(page_title="Bulk Upload", page_icon="📤", layout="wide")

init_database()

# Render the bulk_upload page
render()
