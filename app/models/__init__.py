from app.models.user import User
from app.models.gift_list import GiftList
from app.models.gift import Gift

__all__ = ["User", "GiftList", "Gift"]
