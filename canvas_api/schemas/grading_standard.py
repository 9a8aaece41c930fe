from pydantic import BaseModel

from canvas_api.schemas.base import CanvasModel
from canvas_api.schemas.ids import CanvasID


class GradingSchemeEntry(BaseModel):
    name: str
    value: float


class CanvasGradingStandard(CanvasModel):
    id: CanvasID
    title: str | None = None
    context_type: str | None = None
    context_id: CanvasID | None = None
    grading_scheme: list[GradingSchemeEntry] = []
