"""Ownership checks for lists and gifts.

A list is owned by the user who created it. A gift has no owner of its
own: it belongs to whoever owns its list.

Callers must look the resource up first and raise ``NotFound`` when it is
missing; the checks here only ever see resources that exist.
"""

import enum

from app.errors import Forbidden
from app.identity import Identity
from app.models.gift import Gift
from app.models.gift_list import GiftList


class Decision(enum.Enum):
    ALLOW = "allow"
    DENY = "deny"


def owner_id_of(resource: GiftList | Gift) -> str:
    if isinstance(resource, GiftList):
        return resource.owner_id
    if isinstance(resource, Gift):
        return resource.gift_list.owner_id
    raise TypeError(f"Unsupported resource type: {type(resource).__name__}")


def authorize(identity: Identity, resource: GiftList | Gift) -> Decision:
    if owner_id_of(resource) == identity.id:
        return Decision.ALLOW
    return Decision.DENY


def require_owner(identity: Identity, resource: GiftList | Gift) -> None:
    if authorize(identity, resource) is Decision.DENY:
        raise Forbidden()
