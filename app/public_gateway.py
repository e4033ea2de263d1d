"""Identity-free access to a list through its slug.

The slug is the capability: anyone who has it can view the list and buy
gifts from it, so no ownership check applies here.
"""

import logging

from sqlalchemy.orm import Session

from app import repository
from app.errors import InvalidTransition
from app.gift_status import guest_transition
from app.models.gift_list import GiftList

logger = logging.getLogger("registry.public")


def get_public_list(db: Session, slug: str) -> GiftList:
    return repository.get_list_by_slug(db, slug)


def purchase_gift(db: Session, gift_id: str) -> None:
    gift = repository.get_gift(db, gift_id)
    try:
        guest_transition(gift.status)
    except InvalidTransition:
        logger.warning("Rejected purchase gift=%s status=%s", gift.id, gift.status)
        raise

    if not repository.purchase_if_available(db, gift.id):
        logger.warning("Lost purchase race gift=%s", gift.id)
        raise InvalidTransition()

    logger.info("Gift purchased gift=%s list=%s", gift.id, gift.list_id)
