import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.config import settings
from app.database import Base
from app.gift_status import GiftStatus


class Gift(Base):
    __tablename__ = "gifts"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_gifts_price"),)

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    list_id: Mapped[str] = mapped_column(ForeignKey("lists.id"))
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(String(500), default=None)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"))
    image_url: Mapped[str | None] = mapped_column(String(2048), default=None)
    category: Mapped[str] = mapped_column(
        String(100), default=lambda: settings.default_gift_category
    )
    status: Mapped[str] = mapped_column(
        String(20), default=GiftStatus.AVAILABLE.value
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now()
    )

    gift_list: Mapped["GiftList"] = relationship(
        "GiftList", back_populates="gifts", lazy="selectin"
    )
