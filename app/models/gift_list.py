import uuid
from datetime import date, datetime

from sqlalchemy import Boolean, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class GiftList(Base):
    __tablename__ = "lists"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(String(500), default=None)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    event_date: Mapped[date | None] = mapped_column(default=None)
    event_type: Mapped[str | None] = mapped_column(String(100), default=None)
    is_private: Mapped[bool] = mapped_column(Boolean, default=False)
    owner_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    owner: Mapped["User"] = relationship(
        "User", back_populates="lists", lazy="selectin"
    )

    gifts: Mapped[list["Gift"]] = relationship(
        "Gift",
        back_populates="gift_list",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="Gift.created_at",
    )

    @property
    def owner_name(self) -> str:
        return self.owner.name

    @property
    def gift_count(self) -> int:
        return len(self.gifts)
