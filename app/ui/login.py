# app/ui/login.py

import streamlit as st
from server.core.auth import check_credentials


def login_page():
    st.title("🔐 Login")

    with st.form("login_form"):
        username = st.text_input("Username", placeholder="Enter username...")
        password = st.text_input("Password", type="password", placeholder="Enter password...")
        submitted = st.form_submit_button("Login")

    if submitted:
        if check_credentials(username, password):
            st.session_state["username"] = username
            # Shown once by the main page after the rerun
            st.session_state["flash"] = f"✅ Login successful. Welcome, {username}"
            st.rerun()
        else:
            st.error("Invalid username or password")


def logout():
    st.session_state.pop("username", None)
