from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, Optional

from ..core.constants import DEFAULT_PHOTO
from ..core.enums import MembershipType


@dataclass(frozen=True)
class Member:
    """Domain entity: a registered gym member.

    Note: plain data object, no storage access. ``last_check_in`` and
    ``last_check_out`` are only changed by the attendance service.
    """

    id: str
    name: str
    email: str
    phone: str
    membership_type: MembershipType
    membership_start_date: Optional[datetime]
    membership_end_date: Optional[datetime]
    registration_date: datetime
    photo: str = DEFAULT_PHOTO
    last_check_in: Optional[datetime] = None
    last_check_out: Optional[datetime] = None

    @property
    def is_checked_in(self) -> bool:
        return self.last_check_in is not None and self.last_check_out is None


@dataclass(frozen=True)
class NewMember:
    """Input for MemberRepository.add (no id, no registration date yet)."""

    name: str
    email: str
    phone: str
    membership_type: MembershipType
    membership_start_date: Optional[datetime]
    membership_end_date: Optional[datetime]
    photo: str = DEFAULT_PHOTO


class _Unset:
    _instance: Optional["_Unset"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class MemberUpdate:
    """Partial update: only fields that are not UNSET get merged.

    Passing None explicitly clears a nullable field (check-in uses this to
    reset ``last_check_out``).
    """

    name: Any = UNSET
    email: Any = UNSET
    phone: Any = UNSET
    membership_type: Any = UNSET
    membership_start_date: Any = UNSET
    membership_end_date: Any = UNSET
    photo: Any = UNSET
    last_check_in: Any = UNSET
    last_check_out: Any = UNSET

    def changes(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, member: Member) -> Member:
        changes = self.changes()
        if "membership_type" in changes:
            changes["membership_type"] = MembershipType.parse(changes["membership_type"])
        return replace(member, **changes)
