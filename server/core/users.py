# server/core/users.py

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from server.models.user import User


# -------------------------------
# User store operations
# -------------------------------

def get_password(db: Session, username: str) -> str | None:
    row = db.query(User.password).filter(User.username == username).first()
    return row.password if row else None


def list_users(db: Session) -> list[User]:
    return db.query(User).all()


def create_user(db: Session, username: str, password: str) -> User:
    """
    Inserts a new user and returns it with the id assigned by the store.
    A duplicate username raises the storage error unchanged.
    """
    user = User(username=username, password=password)
    db.add(user)
    _commit(db)
    db.refresh(user)
    return user


def update_password(db: Session, user_id: int, password: str) -> None:
    """
    Overwrites the password of the given user.
    Missing ids are not an error; nothing is updated.
    """
    db.query(User).filter(User.id == user_id).update({User.password: password})
    _commit(db)


def delete_user(db: Session, user_id: int) -> None:
    db.query(User).filter(User.id == user_id).delete()
    _commit(db)


def _commit(db: Session):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
