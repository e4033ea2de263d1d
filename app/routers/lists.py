import logging

from fastapi import APIRouter, status

from app import repository
from app.dependencies import CurrentIdentity, DbSession, OwnedList
from app.schemas.gift_list import (
    GiftListCreate,
    GiftListDetail,
    GiftListRead,
    GiftListSummary,
    GiftListUpdate,
)

logger = logging.getLogger("registry.lists")

router = APIRouter(prefix="/lists", tags=["lists"])


@router.get("", response_model=list[GiftListSummary])
def list_lists(identity: CurrentIdentity, db: DbSession):
    return repository.list_owned(db, identity.id)


@router.post("", response_model=GiftListRead, status_code=status.HTTP_201_CREATED)
def create_list(request: GiftListCreate, identity: CurrentIdentity, db: DbSession):
    gift_list = repository.create_list(
        db, identity.id, **request.model_dump()
    )
    logger.info("List created list=%s owner=%s", gift_list.id, identity.id)
    return gift_list


@router.get("/{list_id}", response_model=GiftListDetail)
def get_list(gift_list: OwnedList):
    return gift_list


@router.patch("/{list_id}", response_model=GiftListRead)
def update_list(updates: GiftListUpdate, gift_list: OwnedList, db: DbSession):
    for field, value in updates.model_dump(exclude_unset=True).items():
        setattr(gift_list, field, value)
    db.flush()
    db.refresh(gift_list)
    return gift_list


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_list(gift_list: OwnedList, db: DbSession):
    logger.info("List deleted list=%s", gift_list.id)
    repository.delete_list(db, gift_list)
