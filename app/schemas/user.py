from datetime import date, datetime

from pydantic import BaseModel, field_validator


class ProfileRead(BaseModel):
    id: str
    name: str
    email: str
    national_id: str | None
    birth_date: date | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    name: str | None = None
    national_id: str | None = None
    birth_date: date | None = None

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be null.")
        return value
