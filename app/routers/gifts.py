from fastapi import APIRouter, status

from app import repository
from app.config import settings
from app.dependencies import DbSession, OwnedGift, OwnedList
from app.gift_status import owner_transition
from app.schemas.gift import GiftCreate, GiftRead, GiftReplace, GiftStatusUpdate

router = APIRouter(tags=["gifts"])


@router.post(
    "/lists/{list_id}/gifts",
    response_model=GiftRead,
    status_code=status.HTTP_201_CREATED,
)
def create_gift(request: GiftCreate, gift_list: OwnedList, db: DbSession):
    return repository.create_gift(
        db,
        gift_list,
        name=request.name,
        description=request.description,
        price=request.price,
        image_url=request.image_url,
        category=request.category or settings.default_gift_category,
    )


@router.put("/gifts/{gift_id}", response_model=GiftRead)
def replace_gift(request: GiftReplace, gift: OwnedGift, db: DbSession):
    gift.name = request.name
    gift.description = request.description
    gift.price = request.price
    gift.image_url = request.image_url
    gift.category = request.category or settings.default_gift_category
    db.flush()
    db.refresh(gift)
    return gift


@router.delete("/gifts/{gift_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_gift(gift: OwnedGift, db: DbSession):
    repository.delete_gift(db, gift)


@router.patch("/gifts/{gift_id}/status", response_model=GiftRead)
def update_gift_status(request: GiftStatusUpdate, gift: OwnedGift, db: DbSession):
    gift.status = owner_transition(gift.status, request.status).value
    db.flush()
    db.refresh(gift)
    return gift
