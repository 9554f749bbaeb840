"""Translation of geometry values to and from the wire and the spatial store.

Wire format is the ``{"type": ..., "coordinates": ...}`` JSON object clients
send and receive. The store side speaks WKT for writes (fed to
``ST_PointFromText`` / ``ST_PolygonFromText``) and hands back the same JSON
object for reads (``ST_AsGeoJSON``).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import StrictFloat, TypeAdapter, ValidationError

from app.domain.geometry import (
    Coordinate,
    Geometry,
    GeometryKind,
    MultiPolygonGeometry,
    PointGeometry,
    PolygonGeometry,
    PolygonRings,
    Ring,
    UnknownGeometry,
)
from app.errors import GeometryDecodeError, UnsupportedGeometryError

_CoordinateShape = tuple[StrictFloat, StrictFloat]
_PolygonShape = tuple[tuple[_CoordinateShape, ...], ...]

_point_adapter = TypeAdapter(_CoordinateShape)
_polygon_adapter = TypeAdapter(_PolygonShape)
_multipolygon_adapter = TypeAdapter(tuple[_PolygonShape, ...])


@dataclass(frozen=True, slots=True)
class StoreLiteral:
    """A WKT literal plus the PostGIS constructor that turns it into a geometry."""

    constructor: str
    text: str


POINT_CONSTRUCTOR = "ST_PointFromText"
POLYGON_CONSTRUCTOR = "ST_PolygonFromText"


# ---------------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------------


def decode_geometry(raw: bytes | str | Mapping[str, Any]) -> Geometry:
    """Build a geometry from its wire representation.

    An unrecognised ``type`` is not an error here: it yields an
    ``UnknownGeometry`` and the validator decides what to do with it.

    Raises:
        GeometryDecodeError: If the document is not JSON, is not an object,
            has no string ``type``, or its coordinates do not fit the type.
    """
    if isinstance(raw, (bytes, str)):
        try:
            document = json.loads(raw)
        except ValueError as exc:
            raise GeometryDecodeError(f"Malformed geometry JSON: {exc}") from exc
    else:
        document = raw

    if not isinstance(document, Mapping):
        raise GeometryDecodeError("Geometry must be a JSON object")

    type_name = document.get("type")
    if not isinstance(type_name, str):
        raise GeometryDecodeError("Geometry 'type' must be a string")

    coordinates = document.get("coordinates")
    try:
        match type_name:
            case GeometryKind.POINT.value:
                return PointGeometry(_point_adapter.validate_python(coordinates))
            case GeometryKind.POLYGON.value:
                return PolygonGeometry(_polygon_adapter.validate_python(coordinates))
            case GeometryKind.MULTI_POLYGON.value:
                return MultiPolygonGeometry(_multipolygon_adapter.validate_python(coordinates))
            case _:
                return UnknownGeometry(type_name)
    except ValidationError as exc:
        raise GeometryDecodeError(
            f"Invalid coordinates for {type_name}: {exc.errors()[0]['msg']}"
        ) from exc


def geometry_to_wire(geometry: Geometry) -> dict[str, Any]:
    """Return the ``{"type", "coordinates"}`` mapping for a geometry."""
    match geometry:
        case PointGeometry(coordinates=coordinates):
            payload: Any = list(coordinates)
        case PolygonGeometry(rings=rings):
            payload = _rings_to_lists(rings)
        case MultiPolygonGeometry(polygons=polygons):
            payload = [_rings_to_lists(rings) for rings in polygons]
        case UnknownGeometry():
            payload = None
    return {"type": geometry.type_name, "coordinates": payload}


def encode_geometry(geometry: Geometry) -> bytes:
    return json.dumps(geometry_to_wire(geometry), separators=(",", ":")).encode("utf-8")


def _rings_to_lists(rings: PolygonRings) -> list[list[list[float]]]:
    return [[list(coordinate) for coordinate in ring] for ring in rings]


# ---------------------------------------------------------------------------
# Store format
# ---------------------------------------------------------------------------


def to_store_literal(geometry: Geometry) -> StoreLiteral:
    """Render a geometry as the WKT literal the store column accepts.

    Raises:
        UnsupportedGeometryError: For kinds with no column to live in.
    """
    match geometry:
        case PointGeometry(coordinates=coordinate):
            return StoreLiteral(POINT_CONSTRUCTOR, f"POINT({_format_coordinate(coordinate)})")
        case PolygonGeometry(rings=rings):
            rendered = ",".join(_format_ring(ring) for ring in rings)
            return StoreLiteral(POLYGON_CONSTRUCTOR, f"POLYGON({rendered})")
        case MultiPolygonGeometry() | UnknownGeometry():
            raise UnsupportedGeometryError(
                f"Geometry type {geometry.type_name!r} cannot be stored"
            )


def geometry_from_store_text(raw: str | bytes | None) -> Geometry:
    """Decode the ``ST_AsGeoJSON`` text of a store row."""
    if not raw:
        return UnknownGeometry()
    return decode_geometry(raw)


def _format_ring(ring: Ring) -> str:
    return "(" + ",".join(_format_coordinate(coordinate) for coordinate in ring) + ")"


def _format_coordinate(coordinate: Coordinate) -> str:
    lon, lat = coordinate
    return f"{_format_number(lon)} {_format_number(lat)}"


def _format_number(value: float) -> str:
    # Shortest round-tripping form; integral values lose the ".0".
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
