from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from app.domain.codec import decode_geometry, geometry_to_wire
from app.domain.geometry import (
    Geometry,
    MultiPolygonGeometry,
    PointGeometry,
    PolygonGeometry,
    UnknownGeometry,
)
from app.errors import GeometryDecodeError

_GEOMETRY_CLASSES = (PointGeometry, PolygonGeometry, MultiPolygonGeometry, UnknownGeometry)


def geometry_validator(value: Any) -> Geometry:
    """
    Validate a geometry.
    """
    if isinstance(value, _GEOMETRY_CLASSES):
        return value
    try:
        return decode_geometry(value)
    except GeometryDecodeError as e:
        # pydantic reports ValueError as a request validation error.
        raise ValueError(str(e)) from e


def geometry_serializer(value: Geometry) -> dict:
    """
    Serialize a geometry.
    """
    return geometry_to_wire(value)


GeometryField = Annotated[
    Geometry,
    PlainValidator(geometry_validator),
    PlainSerializer(geometry_serializer, return_type=dict),
    WithJsonSchema(
        {
            "type": "object",
            "properties": {
                "type": {"type": "string", "enum": ["Point", "Polygon", "MultiPolygon"]},
                "coordinates": {"type": "array"},
            },
            "required": ["type", "coordinates"],
        }
    ),
]
