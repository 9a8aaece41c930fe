"""Canvas identifiers and SIS aliases.

Anywhere Canvas takes a numeric ID it also accepts ``<kind>:<sis id>``, so an
SIS identifier is resolved by prefixing it, with no lookup round-trip.
"""

CanvasID = int | str

SELF = "self"


def sis_section_id(sis_id: str) -> str:
    return f"sis_section_id:{sis_id}"


def sis_course_id(sis_id: str) -> str:
    return f"sis_course_id:{sis_id}"


def sis_user_id(sis_id: str) -> str:
    return f"sis_user_id:{sis_id}"
