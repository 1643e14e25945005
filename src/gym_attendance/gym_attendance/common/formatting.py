from __future__ import annotations

from ..core.enums import MembershipType, MemberStatus

MEMBERSHIP_LABELS = {
    MembershipType.MONTHLY: "Monthly (30 days)",
    MembershipType.QUARTERLY: "Quarterly (90 days)",
    MembershipType.HALF_YEARLY: "Half Yearly (180 days)",
    MembershipType.ANNUAL: "Annual (365 days)",
}

STATUS_LABELS = {
    MemberStatus.CHECKED_IN: "Checked In",
    MemberStatus.CHECKED_OUT: "Checked Out",
    MemberStatus.NOT_CHECKED_IN: "Not Checked In",
}


def format_membership_type(membership_type: MembershipType) -> str:
    return MEMBERSHIP_LABELS.get(membership_type, str(membership_type))


def format_status(status: MemberStatus) -> str:
    return STATUS_LABELS.get(status, str(status))
