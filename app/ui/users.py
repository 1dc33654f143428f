# app/ui/users.py

import re
import streamlit as st
from app.services.api import (
    list_users,
    create_user,
    update_user,
    delete_user,
)


ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_ID = -2**63
MAX_ID = 2**63 - 1


def users_page():
    st.header("👥 User Management")

    handle_create()

    st.subheader("Users List")
    # Filled after the update/delete forms run so the table shows their result
    table_slot = st.container()
    st.button("🔄 Refresh", key="refresh_users")

    handle_update()
    handle_delete()

    with table_slot:
        render_user_table()


def render_user_table():
    users = list_users()
    if isinstance(users, dict) and users.get("error"):
        st.error(f"Failed to fetch users: {users['error']}")
        return

    if not users:
        st.info("No users yet.")
        return

    rows = [
        {"ID": u["id"], "Username": u["username"], "Password": u["password"]}
        for u in users
    ]
    st.dataframe(rows, hide_index=True)


def handle_create():
    st.subheader("Create User")
    with st.form("create_user_form", clear_on_submit=True):
        username = st.text_input("Username", placeholder="Enter username...", key="create_username")
        password = st.text_input("Password", type="password", placeholder="Enter password...", key="create_password")
        submitted = st.form_submit_button("Create User")

    if submitted:
        result = create_user(username, password)
        if isinstance(result, dict) and result.get("error"):
            st.error(f"Failed to create user: {result['error']}")
        else:
            st.success("User created successfully")


def handle_update():
    st.subheader("Update User")
    with st.form("update_user_form", clear_on_submit=True):
        raw_id = st.text_input("User ID", placeholder="Enter user ID...", key="update_id")
        password = st.text_input("New password", type="password", placeholder="Enter new password...", key="update_password")
        submitted = st.form_submit_button("Update User")

    if submitted:
        user_id = parse_id(raw_id)
        if user_id is None:
            st.error("Invalid ID")
            return
        result = update_user(user_id, password)
        if isinstance(result, dict) and result.get("error"):
            st.error(f"Failed to update user: {result['error']}")
        else:
            st.success("User updated successfully")


def handle_delete():
    st.subheader("Delete User")
    with st.form("delete_user_form", clear_on_submit=True):
        raw_id = st.text_input("User ID", placeholder="Enter user ID...", key="delete_id")
        submitted = st.form_submit_button("Delete User")

    if submitted:
        user_id = parse_id(raw_id)
        if user_id is None:
            st.error("Invalid ID")
            return
        result = delete_user(user_id)
        if isinstance(result, dict) and result.get("error"):
            st.error(f"Failed to delete user: {result['error']}")
        else:
            st.success("User deleted successfully")


def parse_id(raw):
    """
    Parses a user id typed into a form. Only plain optionally-signed
    digits within the 64-bit integer range are accepted.
    """
    if not isinstance(raw, str) or not ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not MIN_ID <= value <= MAX_ID:
        return None
    return value
