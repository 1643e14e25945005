"""Derived membership and attendance state.

Nothing here is persisted: days remaining and status are recomputed from the
stored timestamps and the current date on every read.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.enums import MemberStatus

ONE_DAY = timedelta(days=1)


def _midnight(value: date | datetime) -> datetime:
    day = value.date() if isinstance(value, datetime) else value
    return datetime.combine(day, time.min)


def days_remaining(member, today: date | datetime) -> int:
    """Whole days until the membership ends, never negative.

    Both dates are taken at local midnight so the time of day does not
    shift the count.
    """
    if member is None or member.membership_end_date is None:
        return 0

    diff = _midnight(member.membership_end_date) - _midnight(today)
    return max(0, math.ceil(diff / ONE_DAY))


def is_expired(member, today: date | datetime) -> bool:
    return days_remaining(member, today) <= 0


def member_status(member, today: date | datetime) -> MemberStatus:
    if member is None:
        return MemberStatus.NOT_CHECKED_IN

    if member.is_checked_in:
        return MemberStatus.CHECKED_IN

    last_out: Optional[datetime] = member.last_check_out
    if last_out is not None and last_out.date() == _midnight(today).date():
        return MemberStatus.CHECKED_OUT

    return MemberStatus.NOT_CHECKED_IN
