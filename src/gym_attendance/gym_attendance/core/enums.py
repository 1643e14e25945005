from __future__ import annotations

from enum import Enum

from .constants import DEFAULT_MEMBERSHIP_DAYS


class MembershipType(str, Enum):
    """Plan tier; decides how long a membership lasts."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    HALF_YEARLY = "halfyearly"
    ANNUAL = "annual"

    @property
    def days(self) -> int:
        return _MEMBERSHIP_DAYS.get(self, DEFAULT_MEMBERSHIP_DAYS)

    @classmethod
    def parse(cls, value) -> "MembershipType":
        """Unknown or empty values fall back to MONTHLY."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.MONTHLY


_MEMBERSHIP_DAYS = {
    MembershipType.MONTHLY: 30,
    MembershipType.QUARTERLY: 90,
    MembershipType.HALF_YEARLY: 180,
    MembershipType.ANNUAL: 365,
}


class MemberStatus(str, Enum):
    """Derived attendance state, never persisted."""

    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    NOT_CHECKED_IN = "not-checked-in"


class AttendanceType(str, Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"
