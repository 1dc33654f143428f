# server/core/auth.py

import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from server.database import SessionLocal
from server.core.users import get_password


logger = logging.getLogger(__name__)


def authenticate(db: Session, username: str, password: str) -> bool:
    """
    Compares the given password with the stored one for this username.
    Unknown users and storage errors both count as a failed login.
    """
    try:
        stored = get_password(db, username)
    except SQLAlchemyError as e:
        logger.info("Authentication failed: %s", e)
        return False

    if stored is None:
        logger.info("Authentication failed: no user named %r", username)
        return False
    return password == stored


def check_credentials(username: str, password: str) -> bool:
    db = SessionLocal()
    try:
        return authenticate(db, username, password)
    finally:
        db.close()
