from canvas_api.schemas.base import CanvasModel
from canvas_api.schemas.ids import CanvasID


class CanvasAccount(CanvasModel):
    id: CanvasID
    name: str | None = None
    uuid: str | None = None
    parent_account_id: CanvasID | None = None
    root_account_id: CanvasID | None = None
    sis_account_id: str | None = None
    default_time_zone: str | None = None
    workflow_state: str | None = None
