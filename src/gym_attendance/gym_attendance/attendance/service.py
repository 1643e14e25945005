from __future__ import annotations

from typing import Optional

from ..common.clock import Clock
from ..common.logging import get_logger
from ..common.validators import require_non_empty
from ..core.enums import AttendanceType, MemberStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..members.model import Member, MemberUpdate
from ..members.repository import MemberRepository
from ..members.service import member_card
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .status import days_remaining, is_expired, member_status

logger = get_logger(__name__)


class AttendanceService:
    """Check-in/check-out transitions plus the derived member state.

    Guards (expired membership, double check-in, check-out without check-in)
    run here, before anything is written, so a rejected call leaves the
    member and the attendance log untouched.
    """

    def __init__(self, attendance: AttendanceRepository, members: MemberRepository, clock: Clock):
        self._attendance = attendance
        self._members = members
        self._clock = clock

    def days_remaining(self, member: Optional[Member]) -> int:
        return days_remaining(member, self._clock.today())

    def status(self, member: Optional[Member]) -> MemberStatus:
        return member_status(member, self._clock.today())

    def _require_member(self, member_id: str) -> Member:
        member_id = require_non_empty(member_id, "Please enter a member ID")

        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Member not found. Please check the ID and try again.")
        return member

    def check_in(self, member_id: str) -> AttendanceRecord:
        member = self._require_member(member_id)

        if is_expired(member, self._clock.today()):
            raise ValidationError("Membership has expired. Please renew to continue.")
        if self.status(member) == MemberStatus.CHECKED_IN:
            raise ValidationError("Member is already checked in.")

        now = self._clock.now()
        # A fresh check-in always clears the previous check-out.
        self._members.update(member.id, MemberUpdate(last_check_in=now, last_check_out=None))
        record = self._attendance.append(member_id=member.id, type=AttendanceType.CHECK_IN, timestamp=now)
        logger.info("Member %s checked in at %s", member.id, now.isoformat())
        return record

    def check_out(self, member_id: str) -> AttendanceRecord:
        member = self._require_member(member_id)

        if self.status(member) != MemberStatus.CHECKED_IN:
            raise ValidationError("Member is not currently checked in.")

        now = self._clock.now()
        self._members.update(member.id, MemberUpdate(last_check_out=now))
        record = self._attendance.append(member_id=member.id, type=AttendanceType.CHECK_OUT, timestamp=now)
        logger.info("Member %s checked out at %s", member.id, now.isoformat())
        return record

    def member_info(self, member_id: str) -> dict:
        member = self._require_member(member_id)
        return member_card(member, today=self._clock.today())

    def history_for_member(self, member_id: str, *, limit: Optional[int] = None) -> list[dict]:
        if limit is not None and int(limit) < 0:
            raise ValidationError("limit must not be negative")
        member = self._require_member(member_id)
        # Newest first; records sharing a timestamp keep reverse insertion order.
        rows = list(reversed(self._attendance.list_for_member(member.id)))
        rows.sort(key=lambda r: r.timestamp, reverse=True)
        if limit is not None:
            rows = rows[: int(limit)]
        return [self._to_ui(r) for r in rows]

    def _to_ui(self, r: AttendanceRecord) -> dict:
        label = {
            AttendanceType.CHECK_IN: "Check In",
            AttendanceType.CHECK_OUT: "Check Out",
        }.get(r.type, r.type.value)

        return {
            "id": r.id,
            "member_id": r.member_id,
            "type": r.type.value,
            "label": label,
            "date": r.date,
            "time": r.timestamp.strftime("%H:%M:%S"),
        }
