from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member, MemberUpdate, NewMember


class MemberRepository(Protocol):
    """Repository interface for Member.

    Note (DIP): services depend on this interface, not on a concrete storage backend.
    """

    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def add(self, new_member: NewMember) -> Member:
        raise NotImplementedError

    def update(self, member_id: str, changes: MemberUpdate) -> Optional[Member]:
        raise NotImplementedError

    def delete_by_id(self, member_id: str) -> bool:
        raise NotImplementedError

    def generate_id(self) -> str:
        raise NotImplementedError
