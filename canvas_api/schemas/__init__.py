from canvas_api.schemas.account import CanvasAccount
from canvas_api.schemas.course import CanvasCourse, CourseFields, CoursePayload
from canvas_api.schemas.enrollment import CanvasEnrollment, EnrollmentFields, EnrollmentPayload
from canvas_api.schemas.grading_standard import CanvasGradingStandard, GradingSchemeEntry
from canvas_api.schemas.ids import CanvasID, sis_course_id, sis_section_id, sis_user_id
from canvas_api.schemas.section import CanvasSection, SectionFields, SectionPayload

__all__ = [
    "CanvasAccount",
    "CanvasCourse",
    "CanvasEnrollment",
    "CanvasGradingStandard",
    "CanvasID",
    "CanvasSection",
    "CourseFields",
    "CoursePayload",
    "EnrollmentFields",
    "EnrollmentPayload",
    "GradingSchemeEntry",
    "SectionFields",
    "SectionPayload",
    "sis_course_id",
    "sis_section_id",
    "sis_user_id",
]
