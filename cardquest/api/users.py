import re
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from cardquest.core.database import get_db
from cardquest.core.errors import InvalidCardHash, UserNotFound
from cardquest.models.orm import StoredUser
from cardquest.models.schemas import UserData

router = APIRouter()

_SHA256 = re.compile(r"^[0-9a-fA-F]{64}$")


def _user_data(user: StoredUser) -> UserData:
    return UserData(uuid=user.id, username=user.username, card_hash=user.card_hash)


def find_user(db: Session, user_id: UUID) -> StoredUser:
    user = db.scalar(select(StoredUser).where(StoredUser.id == user_id))
    if user is None:
        raise UserNotFound(f"Could not find user with UUID of `{user_id}` in the database!")
    return user


@router.get("/sha/{card_hash}", response_model=UserData)
def get_user_by_hash(card_hash: str, db: Session = Depends(get_db)):
    if not _SHA256.match(card_hash):
        raise InvalidCardHash(card_hash)
    user = db.scalar(select(StoredUser).where(StoredUser.card_hash == card_hash))
    if user is None:
        raise UserNotFound(f"Could not find user with SHA256 card hash of `{card_hash}` in the database!")
    return _user_data(user)


@router.get("/{user_id}", response_model=UserData)
def get_user_by_id(user_id: UUID, db: Session = Depends(get_db)):
    return _user_data(find_user(db, user_id))
