# app/main.py

import streamlit as st
from dotenv import load_dotenv
from server.config import EMBED_API
from server.main import start_in_background
from app.ui.login import login_page, logout
from app.ui.users import users_page


load_dotenv()


st.set_page_config(page_title="User Manager")


@st.cache_resource
def start_api():
    # Runs once per process, shared by every browser session
    return start_in_background()


def main_page():
    st.title(f"Welcome, {st.session_state['username']}")

    flash = st.session_state.pop("flash", None)
    if flash:
        st.success(flash)

    if st.sidebar.button("🔓 Logout"):
        logout()
        st.rerun()

    users_page()


if EMBED_API:
    try:
        start_api()
    except RuntimeError as e:
        st.error(f"❌ {e}")

if "username" not in st.session_state:
    login_page()
else:
    main_page()
