import uuid
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app import repository
from app.authorization import require_owner
from app.database import SessionLocal
from app.errors import AuthError
from app.identity import Identity, verify_token
from app.models.gift import Gift
from app.models.gift_list import GiftList


def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


DbSession = Annotated[Session, Depends(get_db)]

security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    if credentials is None:
        raise AuthError.missing()
    return verify_token(credentials.credentials)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]


def get_list_for_owner(
    list_id: uuid.UUID,
    identity: CurrentIdentity,
    db: DbSession,
) -> GiftList:
    gift_list = repository.get_list(db, str(list_id))
    require_owner(identity, gift_list)
    return gift_list


def get_gift_for_owner(
    gift_id: uuid.UUID,
    identity: CurrentIdentity,
    db: DbSession,
) -> Gift:
    gift = repository.get_gift(db, str(gift_id))
    require_owner(identity, gift)
    return gift


OwnedList = Annotated[GiftList, Depends(get_list_for_owner)]
OwnedGift = Annotated[Gift, Depends(get_gift_for_owner)]
