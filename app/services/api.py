# app/services/api.py

import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the CRUD service
API_URL = os.getenv("API_URL", "http://localhost:8080")


def _json_or_none(res):
    try:
        return res.json()
    except ValueError:
        return None


def _error(res):
    data = _json_or_none(res)
    detail = data.get("detail") if isinstance(data, dict) else None
    return {"error": str(detail) if detail else f"Status {res.status_code}: {res.text}"}


def _result(res):
    if res.status_code != 200:
        return _error(res)
    data = _json_or_none(res)
    if data is None:
        return {"error": f"Invalid response from server: {res.text}"}
    return data


# -------------------------
# User CRUD
# -------------------------

def list_users():
    """
    Fetches all users as a list of {id, username, password} dicts.
    """
    try:
        res = requests.get(f"{API_URL}/users")
    except requests.RequestException as e:
        return {"error": str(e)}
    return _result(res)


def create_user(username, password):
    """
    Creates a user and returns the stored record with its id.
    """
    try:
        res = requests.post(f"{API_URL}/user", json={"username": username, "password": password})
    except requests.RequestException as e:
        return {"error": str(e)}
    return _result(res)


def update_user(user_id, password):
    try:
        res = requests.put(f"{API_URL}/user/{user_id}", json={"password": password})
    except requests.RequestException as e:
        return {"error": str(e)}
    return _result(res)


def delete_user(user_id):
    try:
        res = requests.delete(f"{API_URL}/user/{user_id}")
    except requests.RequestException as e:
        return {"error": str(e)}
    return _result(res)
