from datetime import date, datetime

from pydantic import BaseModel, field_validator

from app.schemas.gift import GiftRead


class GiftListCreate(BaseModel):
    title: str
    description: str | None = None
    slug: str
    event_date: date | None = None
    event_type: str | None = None


class GiftListUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    is_private: bool | None = None
    event_date: date | None = None
    event_type: str | None = None

    @field_validator("title", "is_private")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null.")
        return value


class GiftListRead(BaseModel):
    id: str
    title: str
    description: str | None
    slug: str
    event_date: date | None
    event_type: str | None
    is_private: bool
    owner_id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class GiftListSummary(GiftListRead):
    gifts: list[GiftRead]
    gift_count: int


class GiftListDetail(GiftListRead):
    gifts: list[GiftRead]


class PublicListView(BaseModel):
    """What a guest sees through the shared slug: no owner email or id."""

    title: str
    description: str | None
    slug: str
    event_date: date | None
    event_type: str | None
    owner_name: str
    gifts: list[GiftRead]

    model_config = {"from_attributes": True}
