"""Authenticated actors - one variant per role, each carrying the acting user id"""

from dataclasses import dataclass
from typing import Union

from .models import UserRole


@dataclass(frozen=True)
class Customer:
    user_id: str


@dataclass(frozen=True)
class SalonOwner:
    user_id: str


@dataclass(frozen=True)
class Admin:
    user_id: str


Actor = Union[Customer, SalonOwner, Admin]

_ROLE_TO_ACTOR = {
    UserRole.CUSTOMER.value: Customer,
    UserRole.SALON_OWNER.value: SalonOwner,
    UserRole.ADMIN.value: Admin,
}


def actor_for(user_id: str, role: str) -> Actor:
    """Build the actor variant for a role name; raises ValueError for unknown roles"""
    try:
        return _ROLE_TO_ACTOR[role](user_id)
    except KeyError:
        raise ValueError(f"Unknown role: {role}") from None
