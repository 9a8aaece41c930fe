from datetime import datetime

from pydantic import BaseModel

from canvas_api.schemas.base import CanvasModel
from canvas_api.schemas.ids import CanvasID


class CanvasCourse(CanvasModel):
    id: CanvasID
    name: str | None = None
    course_code: str | None = None
    uuid: str | None = None
    account_id: CanvasID | None = None
    root_account_id: CanvasID | None = None
    enrollment_term_id: CanvasID | None = None
    sis_course_id: str | None = None
    workflow_state: str | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    time_zone: str | None = None


class CourseFields(BaseModel):
    name: str | None = None
    course_code: str | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    license: str | None = None
    is_public: bool | None = None
    default_view: str | None = None
    time_zone: str | None = None
    sis_course_id: str | None = None
    integration_id: str | None = None
    term_id: CanvasID | None = None


class CoursePayload(BaseModel):
    """Body of POST /accounts/:account_id/courses."""

    course: CourseFields
    offer: bool | None = None
    enroll_me: bool | None = None
    enable_sis_reactivation: bool | None = None
