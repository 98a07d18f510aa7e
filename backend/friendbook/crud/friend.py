from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from friendbook.models import Friend


def list_friends(db: Session) -> list[Friend]:
    return list(db.scalars(select(Friend).order_by(Friend.id)))


def get_friend(db: Session, friend_id: int) -> Friend | None:
    return db.get(Friend, friend_id)


def create_friend(db: Session, data: dict[str, Any]) -> Friend:
    friend = Friend(**data)
    db.add(friend)
    db.commit()
    db.refresh(friend)
    return friend


def update_friend(db: Session, friend_id: int, changes: dict[str, Any]) -> Friend | None:
    # Affected-row count stands in for a separate existence read.
    values = {getattr(Friend, key): value for key, value in changes.items()}
    result = db.execute(update(Friend).where(Friend.id == friend_id).values(values))
    if result.rowcount == 0:
        db.rollback()
        return None
    db.commit()
    return db.get(Friend, friend_id)


def delete_friend(db: Session, friend_id: int) -> bool:
    result = db.execute(delete(Friend).where(Friend.id == friend_id))
    if result.rowcount == 0:
        db.rollback()
        return False
    db.commit()
    return True
