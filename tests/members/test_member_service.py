from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.gym_attendance.gym_attendance.core.constants import DEFAULT_PHOTO
from src.gym_attendance.gym_attendance.core.enums import MembershipType
from src.gym_attendance.gym_attendance.core.exceptions import NotFoundError, ValidationError
from src.gym_attendance.gym_attendance.members.model import MemberUpdate
from src.gym_attendance.gym_attendance.members.service import membership_end_date


@pytest.mark.parametrize(
    "plan, days",
    [("monthly", 30), ("quarterly", 90), ("halfyearly", 180), ("annual", 365), ("weekly", 30), ("", 30)],
)
def test_membership_end_date_offsets(plan, days):
    start = datetime(2024, 5, 17, 14, 45)
    assert membership_end_date(start, plan) - start == timedelta(days=days)


def test_register_quarterly_from_new_year(container, clock):
    clock.current = datetime(2024, 1, 1, 0, 0)

    member = container.member_service.register(
        name="Ann", email="ann@example.com", phone="555", membership_type="quarterly"
    )

    assert member.id == "1001"
    assert member.membership_type == MembershipType.QUARTERLY
    assert member.membership_start_date == datetime(2024, 1, 1)
    assert member.membership_end_date == datetime(2024, 3, 31)
    assert member.photo == DEFAULT_PHOTO


def test_register_strips_fields(container):
    member = container.member_service.register(
        name="  Ann  ", email=" ann@example.com ", phone=" 555 ", membership_type=" annual "
    )

    assert member.name == "Ann"
    assert member.email == "ann@example.com"
    assert member.membership_type == MembershipType.ANNUAL


@pytest.mark.parametrize("missing", ["name", "email", "phone", "membership_type"])
def test_register_requires_all_fields(container, missing):
    data = {"name": "Ann", "email": "a@example.com", "phone": "1", "membership_type": "monthly"}
    data[missing] = "   "

    with pytest.raises(ValidationError, match="Please fill in all required fields"):
        container.member_service.register(**data)

    assert container.member_service.list_members() == []


def test_register_keeps_given_photo(container):
    member = container.member_service.register(
        name="Ann", email="a@example.com", phone="1", membership_type="monthly", photo="data:image/png;base64,AAAA"
    )
    assert member.photo == "data:image/png;base64,AAAA"


def test_get_unknown_member_raises(container):
    with pytest.raises(NotFoundError):
        container.member_service.get("4242")


def test_search_by_name_or_id(container):
    svc = container.member_service
    svc.register(name="Alice Smith", email="a@example.com", phone="1", membership_type="monthly")
    svc.register(name="Bob Stone", email="b@example.com", phone="2", membership_type="monthly")

    assert [m.name for m in svc.search("alice")] == ["Alice Smith"]
    assert [m.name for m in svc.search("STONE")] == ["Bob Stone"]
    assert [m.id for m in svc.search("1002")] == ["1002"]
    assert len(svc.search("100")) == 2
    assert len(svc.search("  ")) == 2
    assert svc.search("zzz") == []


def test_update_unknown_member_raises(container):
    with pytest.raises(NotFoundError):
        container.member_service.update("1", MemberUpdate(name="X"))


def test_update_rejects_blank_name(container):
    member = container.member_service.register(name="Ann", email="a@example.com", phone="1", membership_type="monthly")

    with pytest.raises(ValidationError):
        container.member_service.update(member.id, MemberUpdate(name=" "))


def test_delete_returns_whether_removed(container):
    member = container.member_service.register(name="Ann", email="a@example.com", phone="1", membership_type="monthly")

    assert container.member_service.delete("nope") is False
    assert container.member_service.delete(member.id) is True
    assert container.member_service.list_members() == []


def test_member_cards_show_days_and_status(container, clock):
    member = container.member_service.register(name="Ann", email="a@example.com", phone="1", membership_type="monthly")

    card = container.member_service.member_cards([member])[0]

    assert card["id"] == member.id
    assert card["membership"] == "Monthly (30 days)"
    assert card["days_remaining"] == 30
    assert card["status"] == "not-checked-in"
    assert card["status_label"] == "Not Checked In"


def test_get_update_delete_strip_member_id(container):
    member = container.member_service.register(name="Ann", email="a@example.com", phone="1", membership_type="monthly")

    assert container.member_service.get(f" {member.id} ").id == member.id
    assert container.member_service.update(f" {member.id} ", MemberUpdate(phone="2")).phone == "2"
    assert container.member_service.delete(f"  {member.id}  ") is True
    assert container.member_service.list_members() == []


def test_update_rejects_non_text_fields(container):
    member = container.member_service.register(name="Ann", email="a@example.com", phone="1", membership_type="monthly")

    with pytest.raises(ValidationError):
        container.member_service.update(member.id, MemberUpdate(name=123))
    assert container.member_service.get(member.id).name == "Ann"


@pytest.mark.parametrize("photo", ["https://example.com/a.png", "data:text/plain;base64,AAAA", 42])
def test_register_rejects_bad_photo_reference(container, photo):
    with pytest.raises(ValidationError):
        container.member_service.register(
            name="Ann", email="a@example.com", phone="1", membership_type="monthly", photo=photo
        )
    assert container.member_service.list_members() == []
