from pydantic import BaseModel, ConfigDict, model_serializer

from app.schemas.geometry import GeometryField


class Contour(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = 0
    data: GeometryField

    @model_serializer(mode="wrap")
    def omit_unassigned_id(self, handler):
        """Drop ``id`` when it is 0, e.g. for intersection results."""
        payload = handler(self)
        if not payload.get("id"):
            payload.pop("id", None)
        return payload


class ContourCreate(BaseModel):
    data: GeometryField


class ContourUpdate(BaseModel):
    data: GeometryField
