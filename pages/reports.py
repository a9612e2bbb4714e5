"""
Reports Page
============
MIS reports page for Streamlit multipage app
"""

import streamlit as st
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import the reports functionality
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from app_pages.reports import render
from db_setup.init_db import init_database

# Set page config for this page
st.set_page_config(page_title="Reports", page_icon="📊", layout="wide")

init_database()

# Render the reports page
render()
