from decimal import Decimal

import pytest

from app import public_gateway, repository
from app.errors import InvalidTransition, NotFound
from app.models.gift import Gift
from app.models.gift_list import GiftList
from app.models.user import User


@pytest.fixture
def committed_gift_id(file_sessions):
    with file_sessions() as session:
        owner = User(email="owner@test.com", name="Owner", password_hash="h")
        session.add(owner)
        session.flush()
        gift_list = GiftList(title="Wedding", slug="wedding", owner_id=owner.id)
        gift_list.gifts.append(Gift(name="Blender", price=Decimal("50")))
        session.add(gift_list)
        session.commit()
        return gift_list.gifts[0].id


def test_purchase_if_available_only_once(db, sample_gift):
    assert repository.purchase_if_available(db, sample_gift.id) is True
    assert repository.purchase_if_available(db, sample_gift.id) is False
    assert sample_gift.status == "PURCHASED"


def test_concurrent_purchases_only_one_wins(file_sessions, committed_gift_id):
    first = file_sessions()
    second = file_sessions()
    try:
        # Both requests have already read the gift as available.
        assert first.get(Gift, committed_gift_id).status == "AVAILABLE"
        assert second.get(Gift, committed_gift_id).status == "AVAILABLE"

        public_gateway.purchase_gift(first, committed_gift_id)
        first.commit()

        with pytest.raises(InvalidTransition):
            public_gateway.purchase_gift(second, committed_gift_id)
        second.rollback()
    finally:
        first.close()
        second.close()

    with file_sessions() as session:
        assert session.get(Gift, committed_gift_id).status == "PURCHASED"


def test_public_list_unknown_slug(db):
    with pytest.raises(NotFound):
        public_gateway.get_public_list(db, "xyz")


def test_purchase_unknown_gift(db):
    with pytest.raises(NotFound):
        public_gateway.purchase_gift(db, "00000000-0000-0000-0000-000000000000")
