from pydantic import BaseModel

from canvas_api.schemas.base import CanvasModel
from canvas_api.schemas.ids import CanvasID


class CanvasEnrollment(CanvasModel):
    id: CanvasID
    course_id: CanvasID
    course_section_id: CanvasID | None = None
    user_id: CanvasID | None = None
    type: str | None = None  # e.g. "StudentEnrollment"
    role: str | None = None
    role_id: CanvasID | None = None
    enrollment_state: str | None = None
    sis_course_id: str | None = None
    sis_section_id: str | None = None
    sis_user_id: str | None = None
    limit_privileges_to_course_section: bool | None = None


class EnrollmentFields(BaseModel):
    user_id: CanvasID
    type: str | None = None
    role_id: CanvasID | None = None
    enrollment_state: str | None = None  # "active", "invited" or "inactive"
    course_section_id: CanvasID | None = None
    limit_privileges_to_course_section: bool | None = None
    notify: bool | None = None


class EnrollmentPayload(BaseModel):
    """Body of POST /courses/:course_id/enrollments."""

    enrollment: EnrollmentFields
