from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from app.ui import login, users


APP_PATH = str(Path(__file__).resolve().parents[1] / "app" / "main.py")


class FakeBackend:
    """Stands in for the HTTP client and records every call."""

    def __init__(self):
        self.calls = []
        self.list_calls = 0
        self.create_result = {"id": 2, "username": "bob", "password": "pw"}

    def list_users(self):
        self.list_calls += 1
        return [{"id": 1, "username": "alice", "password": "secret"}]

    def create_user(self, username, password):
        self.calls.append(("create", username, password))
        return self.create_result

    def update_user(self, user_id, password):
        self.calls.append(("update", user_id, password))
        return {"status": "success"}

    def delete_user(self, user_id):
        self.calls.append(("delete", user_id))
        return {"status": "success"}


@pytest.fixture
def fake_backend(monkeypatch):
    backend = FakeBackend()
    monkeypatch.setattr(login, "check_credentials", lambda u, p: (u, p) == ("alice", "secret"))
    for name in ("list_users", "create_user", "update_user", "delete_user"):
        monkeypatch.setattr(users, name, getattr(backend, name))
    return backend


def button(at, label):
    return next(b for b in at.button if b.label == label)


def logged_in_app():
    at = AppTest.from_file(APP_PATH)
    at.session_state["username"] = "alice"
    return at.run()


def test_login_rejects_bad_password(fake_backend):
    at = AppTest.from_file(APP_PATH).run()
    at.text_input[0].input("alice")
    at.text_input[1].input("wrong")
    button(at, "Login").click().run()

    assert [e.value for e in at.error] == ["Invalid username or password"]
    assert at.title[0].value == "🔐 Login"


def test_login_opens_user_page(fake_backend):
    at = AppTest.from_file(APP_PATH).run()
    at.text_input[0].input("alice")
    at.text_input[1].input("secret")
    button(at, "Login").click().run()

    assert at.session_state["username"] == "alice"
    assert at.title[0].value == "Welcome, alice"
    assert "✅ Login successful. Welcome, alice" in [s.value for s in at.success]


def test_login_message_shown_once(fake_backend):
    at = AppTest.from_file(APP_PATH).run()
    at.text_input[0].input("alice")
    at.text_input[1].input("secret")
    button(at, "Login").click().run()

    button(at, "🔄 Refresh").click().run()
    assert [s.value for s in at.success] == []


def test_create_user(fake_backend):
    at = logged_in_app()
    lists_before = fake_backend.list_calls

    at.text_input(key="create_username").input("bob")
    at.text_input(key="create_password").input("pw")
    button(at, "Create User").click().run()

    assert fake_backend.calls == [("create", "bob", "pw")]
    assert "User created successfully" in [s.value for s in at.success]
    assert fake_backend.list_calls > lists_before


def test_create_user_error(fake_backend):
    fake_backend.create_result = {"error": "UNIQUE constraint failed: users.username"}
    at = logged_in_app()

    at.text_input(key="create_username").input("alice")
    at.text_input(key="create_password").input("pw")
    button(at, "Create User").click().run()

    assert "Failed to create user: UNIQUE constraint failed: users.username" in [e.value for e in at.error]
    assert [s.value for s in at.success] == []


def test_update_user(fake_backend):
    at = logged_in_app()
    lists_before = fake_backend.list_calls

    at.text_input(key="update_id").input("1")
    at.text_input(key="update_password").input("changed")
    button(at, "Update User").click().run()

    assert fake_backend.calls == [("update", 1, "changed")]
    assert "User updated successfully" in [s.value for s in at.success]
    assert fake_backend.list_calls > lists_before


def test_update_with_invalid_id(fake_backend):
    at = logged_in_app()

    at.text_input(key="update_id").input("abc")
    button(at, "Update User").click().run()

    assert "Invalid ID" in [e.value for e in at.error]
    assert fake_backend.calls == []


def test_delete_user(fake_backend):
    at = logged_in_app()

    at.text_input(key="delete_id").input("1")
    button(at, "Delete User").click().run()

    assert fake_backend.calls == [("delete", 1)]
    assert "User deleted successfully" in [s.value for s in at.success]


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    ("+7", 7),
    ("-3", -3),
    (str(2**63 - 1), 2**63 - 1),
    ("1_0", None),
    (" 1", None),
    ("1 ", None),
    ("", None),
    ("abc", None),
    (str(2**63), None),
])
def test_parse_id(raw, expected):
    assert users.parse_id(raw) == expected
