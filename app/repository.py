"""Persistence helpers for users, lists and gifts.

Routers and the public gateway go through these functions rather than
building queries themselves. ``purchase_if_available`` is the one write
that must be atomic: it is a conditional update whose affected-row count
tells the caller whether it won.
"""

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import Conflict, NotFound
from app.gift_status import GiftStatus
from app.models.gift import Gift
from app.models.gift_list import GiftList
from app.models.user import User


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found.")
    return user


def create_user(db: Session, name: str, email: str, password: str) -> User:
    if get_user_by_email(db, email) is not None:
        raise Conflict("User already exists.")

    user = User(name=name, email=email, password_hash="")
    user.set_password(password)
    db.add(user)
    _flush_unique(
        db, "User already exists.", lambda: get_user_by_email(db, email) is not None
    )
    return user


def get_list(db: Session, list_id: str) -> GiftList:
    gift_list = db.get(GiftList, list_id)
    if gift_list is None:
        raise NotFound("List not found.")
    return gift_list


def get_list_by_slug(db: Session, slug: str) -> GiftList:
    gift_list = db.execute(
        select(GiftList).where(GiftList.slug == slug)
    ).scalar_one_or_none()
    if gift_list is None:
        raise NotFound("List not found.")
    return gift_list


def list_owned(db: Session, owner_id: str) -> list[GiftList]:
    """Lists owned by a user, newest first."""
    query = (
        select(GiftList)
        .where(GiftList.owner_id == owner_id)
        .order_by(GiftList.created_at.desc(), GiftList.id)
    )
    return list(db.execute(query).scalars().all())


def create_list(db: Session, owner_id: str, **fields) -> GiftList:
    if _slug_taken(db, fields["slug"]):
        raise Conflict("Slug already exists.")

    gift_list = GiftList(owner_id=owner_id, **fields)
    db.add(gift_list)
    _flush_unique(db, "Slug already exists.", lambda: _slug_taken(db, fields["slug"]))
    return gift_list


def get_gift(db: Session, gift_id: str) -> Gift:
    gift = db.get(Gift, gift_id)
    if gift is None:
        raise NotFound("Gift not found.")
    return gift


def create_gift(db: Session, gift_list: GiftList, **fields) -> Gift:
    gift = Gift(status=GiftStatus.AVAILABLE.value, **fields)
    gift_list.gifts.append(gift)
    db.flush()
    db.refresh(gift)
    return gift


def delete_list(db: Session, gift_list: GiftList) -> None:
    db.delete(gift_list)
    db.flush()


def delete_gift(db: Session, gift: Gift) -> None:
    gift.gift_list.gifts.remove(gift)
    db.flush()


def purchase_if_available(db: Session, gift_id: str) -> bool:
    """Mark a gift purchased only if it is still available.

    Returns:
        True if this call moved the gift to PURCHASED, False if the gift
        was no longer available when the update ran.
    """
    result = db.execute(
        update(Gift)
        .where(Gift.id == gift_id, Gift.status == GiftStatus.AVAILABLE.value)
        .values(status=GiftStatus.PURCHASED.value)
        .execution_options(synchronize_session="evaluate")
    )
    db.flush()
    return result.rowcount == 1


def _slug_taken(db: Session, slug: str) -> bool:
    return db.execute(
        select(GiftList.id).where(GiftList.slug == slug)
    ).first() is not None


def _flush_unique(db: Session, message: str, duplicate_exists) -> None:
    """Flush, turning a lost race on a unique column into ``Conflict``.

    Other integrity failures, such as a dangling foreign key, propagate.
    """
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        if duplicate_exists():
            raise Conflict(message)
        raise
