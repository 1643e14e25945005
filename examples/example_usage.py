"""Example: drive the service layer directly (no Flask).

Registers a member in an in-memory store, checks them in and out, and prints
the member card and attendance history.
"""

from src.gym_attendance.gym_attendance.container import build_container


def main():
    container = build_container(backend="memory")

    member = container.member_service.register(
        name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        membership_type="quarterly",
    )
    container.attendance_service.check_in(member.id)
    container.attendance_service.check_out(member.id)

    print(container.attendance_service.member_info(member.id))
    print(container.attendance_service.history_for_member(member.id, limit=5))


if __name__ == "__main__":
    main()
