import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas import user as user_schema


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def upsert_user(db: Session, user: user_schema.UserUpsert) -> User:
    """Insert the user, or overwrite its identity fields if the id already exists."""
    db_user = get_user(db, user.id)
    if db_user is None:
        db_user = User(**user.model_dump())
        db.add(db_user)
    else:
        for field, value in user.model_dump(exclude={"id"}).items():
            setattr(db_user, field, value)
        db_user.updated_at = datetime.datetime.utcnow()
    db.commit()
    db.refresh(db_user)
    return db_user
