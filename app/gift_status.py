"""Gift status state machine.

A gift starts ``AVAILABLE`` and moves to ``RESERVED`` or ``PURCHASED``.
Two callers drive it:

* the list owner, who may set any status directly (including resetting a
  purchased gift back to available);
* a guest on the public page, who may only buy an available gift.
"""

import enum

from app.errors import InvalidTransition


class GiftStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    PURCHASED = "PURCHASED"


INITIAL_STATUS = GiftStatus.AVAILABLE

GUEST_TRANSITIONS: dict[GiftStatus, GiftStatus] = {
    GiftStatus.AVAILABLE: GiftStatus.PURCHASED,
}


def owner_transition(current: GiftStatus | str, target: GiftStatus | str) -> GiftStatus:
    """Return the status an owner-initiated change lands on.

    Owners are unconstrained: the current status, whatever it is, does not
    limit the move. Only the target has to be a known status.
    """
    return GiftStatus(target)


def guest_transition(current: GiftStatus | str) -> GiftStatus:
    """Return the status a guest purchase lands on.

    Raises:
        InvalidTransition: if the gift is not currently available.
    """
    target = GUEST_TRANSITIONS.get(GiftStatus(current))
    if target is None:
        raise InvalidTransition()
    return target
