"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MEMBERS_KEY = "gym_members"
ATTENDANCE_KEY = "gym_attendance"
MEMBER_ID_COUNTER_KEY = "member_id_counter"

# Member IDs start right after this value (first member gets "1001").
MEMBER_ID_COUNTER_START = 1000

DEFAULT_PHOTO = "img/default-profile.png"

DEFAULT_MEMBERSHIP_DAYS = 30
