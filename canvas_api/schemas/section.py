from datetime import datetime

from pydantic import BaseModel

from canvas_api.schemas.base import CanvasModel
from canvas_api.schemas.ids import CanvasID


class CanvasSection(CanvasModel):
    id: CanvasID
    name: str | None = None
    course_id: CanvasID | None = None
    nonxlist_course_id: CanvasID | None = None
    sis_section_id: str | None = None
    sis_course_id: str | None = None
    integration_id: str | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    total_students: int | None = None


class SectionFields(BaseModel):
    name: str | None = None
    sis_section_id: str | None = None
    integration_id: str | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    restrict_enrollments_to_section_dates: bool | None = None


class SectionPayload(BaseModel):
    """Body of POST /courses/:course_id/sections and PUT /sections/:id."""

    course_section: SectionFields
    enable_sis_reactivation: bool | None = None

    @classmethod
    def void_sis_section_id(cls) -> "SectionPayload":
        """Payload that clears a section's SIS id (serializes as null)."""
        return cls(course_section=SectionFields(sis_section_id=None))
