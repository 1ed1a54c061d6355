"""
User role and account status enums with display descriptions.
"""
from enum import Enum, IntEnum
from typing import Any, Dict, List, Type


class UserRole(IntEnum):
    """Roles a portal user can hold."""
    ADMIN = 1
    UNIT_ADMIN = 2
    USER = 3

    @property
    def description(self) -> str:
        return _ROLE_DESCRIPTIONS[self.value]


class UserAccountStatus(IntEnum):
    """Account activation states."""
    INACTIVE = 0
    ACTIVE = 1

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self.value]


# Keyed by value: members of different IntEnums compare equal as ints.
_ROLE_DESCRIPTIONS: Dict[int, str] = {
    1: "Admin",
    2: "Unit Admin",
    3: "User",
}

_STATUS_DESCRIPTIONS: Dict[int, str] = {
    0: "Inactive",
    1: "Active",
}


def get_enum_lookup(enum_cls: Type[Enum]) -> List[Dict[str, Any]]:
    """Build ``value``/``name``/``description`` rows for a drop-down."""
    return [
        {
            "value": member.value,
            "name": member.name,
            "description": getattr(member, "description", member.name)
        }
        for member in enum_cls
    ]
