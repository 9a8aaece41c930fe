from pydantic import BaseModel, ConfigDict


class CanvasModel(BaseModel):
    """Resource returned by Canvas. Unknown fields are kept, not validated."""

    model_config = ConfigDict(extra="allow")


def dump_payload(payload: BaseModel | dict) -> dict:
    """Request body for a payload model, keeping only the fields the caller set."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=True)
    return dict(payload)
