"""
Training Page
=============
Training and certification page for Streamlit multipage app
"""

import streamlit as st
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import the training functionality
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from app_pages.training import render
from db_setup.init_db import init_database

# Set page config for this page
st.set_page_config(page_title="Training", page_icon="🎓", layout="wide")

init_database()

# Render the training page
render()
