# server/api/users.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Depends, Path
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session

from server.core import users as store
from server.database import get_db


logger = logging.getLogger(__name__)

router = APIRouter()

# SQLite INTEGER range; larger ids are rejected as malformed
MIN_ID = -2**63
MAX_ID = 2**63 - 1


class UserCreateRequest(BaseModel):
    username: str
    password: str


class PasswordUpdateRequest(BaseModel):
    password: str


def storage_error(action: str, e: SQLAlchemyError) -> HTTPException:
    """
    Builds a 500 response carrying the storage error message as-is.
    """
    logger.error("Failed to %s user: %s", action, e)
    message = str(e.orig) if isinstance(e, DBAPIError) else str(e)
    return HTTPException(status_code=500, detail=message)


# -------------------------------
# User CRUD Endpoints
# -------------------------------

@router.get("/users")
def list_users(db: Session = Depends(get_db)):
    try:
        return [user.to_dict() for user in store.list_users(db)]
    except SQLAlchemyError as e:
        raise storage_error("list", e)


@router.post("/user")
def create_user(req: UserCreateRequest, db: Session = Depends(get_db)):
    """
    Inserts a user and returns the stored record including its new id.
    """
    try:
        user = store.create_user(db, req.username, req.password)
    except SQLAlchemyError as e:
        raise storage_error("insert", e)
    return user.to_dict()


@router.put("/user/{user_id}")
def update_user(req: PasswordUpdateRequest, user_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    """
    Replaces the password only. Succeeds even when the id does not exist.
    """
    try:
        store.update_password(db, user_id, req.password)
    except SQLAlchemyError as e:
        raise storage_error("update", e)
    return {"status": "success"}


@router.delete("/user/{user_id}")
def delete_user(user_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    try:
        store.delete_user(db, user_id)
    except SQLAlchemyError as e:
        raise storage_error("delete", e)
    return {"status": "success"}
