import uuid

from fastapi import APIRouter

from app import public_gateway
from app.dependencies import DbSession
from app.schemas.gift import PurchaseConfirmation
from app.schemas.gift_list import PublicListView

router = APIRouter(prefix="/public", tags=["public"])


@router.get("/lists/{slug}", response_model=PublicListView)
def get_public_list(slug: str, db: DbSession):
    return public_gateway.get_public_list(db, slug)


@router.patch("/gifts/{gift_id}/purchase", response_model=PurchaseConfirmation)
def purchase_gift(gift_id: uuid.UUID, db: DbSession):
    public_gateway.purchase_gift(db, str(gift_id))
    return PurchaseConfirmation()
