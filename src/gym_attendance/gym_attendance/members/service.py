from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..common.clock import Clock
from ..common.formatting import format_membership_type, format_status
from ..common.logging import get_logger
from ..common.validators import require_all_non_empty
from ..core.constants import DEFAULT_PHOTO
from ..core.enums import MembershipType, MemberStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..attendance.status import days_remaining, member_status
from .model import Member, MemberUpdate, NewMember
from .photo import require_photo_reference
from .repository import MemberRepository

logger = get_logger(__name__)

STATUS_CSS = {
    MemberStatus.CHECKED_IN: "checked-in",
    MemberStatus.CHECKED_OUT: "checked-out",
    MemberStatus.NOT_CHECKED_IN: "not-checked-in",
}


def _clean_id(member_id) -> str:
    return str(member_id or "").strip()


def membership_end_date(start: datetime, membership_type) -> datetime:
    """Unknown plan names count as monthly (30 days)."""
    return start + timedelta(days=MembershipType.parse(membership_type).days)


def member_card(member: Member, *, today) -> dict:
    """Display row shared by the member list and the check-in screen."""

    status = member_status(member, today)
    return {
        "id": member.id,
        "name": member.name,
        "email": member.email,
        "phone": member.phone,
        "photo": member.photo or DEFAULT_PHOTO,
        "membership_type": member.membership_type.value,
        "membership": format_membership_type(member.membership_type),
        "membership_end_date": member.membership_end_date.strftime("%Y-%m-%d") if member.membership_end_date else "-",
        "days_remaining": days_remaining(member, today),
        "status": status.value,
        "status_label": format_status(status),
        "css_class": STATUS_CSS.get(status, "not-checked-in"),
    }


class MemberService:
    """Use cases: register, look up, search, edit and remove members."""

    def __init__(self, members: MemberRepository, clock: Clock):
        self._members = members
        self._clock = clock

    def register(
        self,
        *,
        name: str,
        email: str,
        phone: str,
        membership_type: str,
        photo: Optional[str] = None,
    ) -> Member:
        cleaned = require_all_non_empty(
            {"name": name, "email": email, "phone": phone, "membership_type": membership_type},
            "Please fill in all required fields",
        )

        start = self._clock.now()
        plan = MembershipType.parse(cleaned["membership_type"])
        member = self._members.add(
            NewMember(
                name=cleaned["name"],
                email=cleaned["email"],
                phone=cleaned["phone"],
                membership_type=plan,
                membership_start_date=start,
                membership_end_date=membership_end_date(start, plan),
                photo=require_photo_reference(photo),
            )
        )
        logger.info("Registered member %s (%s, %s)", member.id, member.name, plan.value)
        return member

    def get(self, member_id: str) -> Member:
        member = self._members.get_by_id(_clean_id(member_id))
        if not member:
            raise NotFoundError("Member not found. Please check the ID and try again.")
        return member

    def list_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def search(self, term: str) -> Sequence[Member]:
        """Case-insensitive match on name, substring match on id."""

        needle = (term or "").strip().lower()
        members = self._members.list_all()
        if not needle:
            return members
        return [m for m in members if needle in m.name.lower() or needle in m.id]

    def update(self, member_id: str, changes: MemberUpdate) -> Member:
        given = changes.changes()
        for field in ("name", "email", "phone", "membership_type"):
            if field in given and not isinstance(given[field], str):
                raise ValidationError(f"{field} must be text")
        if "name" in given and not changes.name.strip():
            raise ValidationError("Name cannot be empty")
        if "photo" in given:
            changes = replace(changes, photo=require_photo_reference(changes.photo))

        updated = self._members.update(_clean_id(member_id), changes)
        if not updated:
            raise NotFoundError("Member not found. Please check the ID and try again.")
        return updated

    def delete(self, member_id: str) -> bool:
        member_id = _clean_id(member_id)
        deleted = self._members.delete_by_id(member_id)
        if deleted:
            logger.info("Deleted member %s", member_id)
        return deleted

    def member_cards(self, members: Sequence[Member]) -> list[dict]:
        today = self._clock.today()
        return [member_card(m, today=today) for m in members]
