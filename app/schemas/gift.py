from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from app.gift_status import GiftStatus


class GiftCreate(BaseModel):
    name: str
    description: str | None = None
    price: Decimal = Field(ge=0)
    image_url: str | None = None
    category: str | None = None


class GiftReplace(GiftCreate):
    pass


class GiftStatusUpdate(BaseModel):
    status: GiftStatus


class GiftRead(BaseModel):
    id: str
    list_id: str
    name: str
    description: str | None
    price: Decimal
    image_url: str | None
    category: str
    status: GiftStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PurchaseConfirmation(BaseModel):
    message: str = "Gift marked as purchased."
