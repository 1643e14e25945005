from __future__ import annotations

import json
from typing import Optional, Sequence

from ..common.clock import Clock, parse_iso_datetime, to_iso
from ..core.constants import DEFAULT_PHOTO, MEMBER_ID_COUNTER_KEY, MEMBER_ID_COUNTER_START, MEMBERS_KEY
from ..core.enums import MembershipType
from ..storage.kv_store import KeyValueStore
from .model import Member, MemberUpdate, NewMember
from .repository import MemberRepository


def member_to_dict(m: Member) -> dict:
    return {
        "id": m.id,
        "name": m.name,
        "email": m.email,
        "phone": m.phone,
        "membershipType": m.membership_type.value,
        "membershipStartDate": to_iso(m.membership_start_date),
        "membershipEndDate": to_iso(m.membership_end_date),
        "photo": m.photo,
        "registrationDate": to_iso(m.registration_date),
        "lastCheckIn": to_iso(m.last_check_in),
        "lastCheckOut": to_iso(m.last_check_out),
    }


def member_from_dict(row: dict) -> Member:
    return Member(
        id=str(row["id"]),
        name=row.get("name") or "",
        email=row.get("email") or "",
        phone=row.get("phone") or "",
        membership_type=MembershipType.parse(row.get("membershipType")),
        membership_start_date=parse_iso_datetime(row.get("membershipStartDate")),
        membership_end_date=parse_iso_datetime(row.get("membershipEndDate")),
        photo=row.get("photo") or DEFAULT_PHOTO,
        registration_date=parse_iso_datetime(row.get("registrationDate")),
        last_check_in=parse_iso_datetime(row.get("lastCheckIn")),
        last_check_out=parse_iso_datetime(row.get("lastCheckOut")),
    )


class KeyValueMemberRepository(MemberRepository):
    """Members kept as one JSON array under ``gym_members``."""

    def __init__(self, store: KeyValueStore, clock: Clock):
        self._store = store
        self._clock = clock

    def _load(self) -> list[Member]:
        raw = self._store.get(MEMBERS_KEY) or "[]"
        return [member_from_dict(row) for row in json.loads(raw)]

    def _save(self, members: Sequence[Member]) -> None:
        self._store.set(MEMBERS_KEY, json.dumps([member_to_dict(m) for m in members]))

    def list_all(self) -> Sequence[Member]:
        return self._load()

    def get_by_id(self, member_id: str) -> Optional[Member]:
        for m in self._load():
            if m.id == member_id:
                return m
        return None

    def add(self, new_member: NewMember) -> Member:
        members = self._load()
        member = Member(
            id=self.generate_id(),
            name=new_member.name,
            email=new_member.email,
            phone=new_member.phone,
            membership_type=MembershipType.parse(new_member.membership_type),
            membership_start_date=new_member.membership_start_date,
            membership_end_date=new_member.membership_end_date,
            photo=new_member.photo or DEFAULT_PHOTO,
            registration_date=self._clock.now(),
            last_check_in=None,
            last_check_out=None,
        )
        members.append(member)
        self._save(members)
        return member

    def update(self, member_id: str, changes: MemberUpdate) -> Optional[Member]:
        members = self._load()
        for index, m in enumerate(members):
            if m.id == member_id:
                members[index] = changes.apply_to(m)
                self._save(members)
                return members[index]
        return None

    def delete_by_id(self, member_id: str) -> bool:
        members = self._load()
        remaining = [m for m in members if m.id != member_id]
        if len(remaining) == len(members):
            return False
        self._save(remaining)
        return True

    def generate_id(self) -> str:
        # Not safe with concurrent writers; the app has a single writer.
        raw = self._store.get(MEMBER_ID_COUNTER_KEY)
        counter = int(raw) if raw else MEMBER_ID_COUNTER_START
        counter += 1
        self._store.set(MEMBER_ID_COUNTER_KEY, str(counter))
        return str(counter)
