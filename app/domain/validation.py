"""Domain validity rules for geometry values."""

from __future__ import annotations

from app.domain.geometry import (
    Coordinate,
    Geometry,
    PointGeometry,
    PolygonGeometry,
)
from app.errors import (
    CoordinatesOutOfRangeError,
    InvalidContoursError,
    InvalidGeometryTypeError,
)

MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0
MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0


def validate_geometry(
    geometry: Geometry,
    expected: type[PointGeometry] | type[PolygonGeometry] | None = None,
) -> None:
    """
    Check a geometry against the domain rules.

    - Point: longitude in [-180, 180], latitude in [-90, 90]
    - Polygon: each ring, in order, must have at least 2 positions and be
      closed (first == last); then each of its positions must be in range
    - Any other kind is rejected

    The first violation found is raised. When ``expected`` is given, a
    geometry of any other kind is rejected as well.

    Raises:
        InvalidGeometryTypeError: Unsupported kind, or not the expected kind
        InvalidContoursError: A ring is too short or not closed
        CoordinatesOutOfRangeError: A position lies outside the bounds
    """
    if expected is not None and not isinstance(geometry, expected):
        raise InvalidGeometryTypeError(
            f"Expected {expected.kind.value} geometry, got {geometry.type_name!r}"
        )

    match geometry:
        case PointGeometry(coordinates=coordinate):
            _check_in_range(coordinate)
        case PolygonGeometry(rings=rings):
            _validate_rings(rings)
        case _:
            raise InvalidGeometryTypeError(
                f"Invalid geometry type: {geometry.type_name!r}"
            )


def _validate_rings(rings) -> None:
    for index, ring in enumerate(rings):
        if len(ring) < 2:
            raise InvalidContoursError(f"Ring {index} has fewer than 2 positions")
        if ring[0] != ring[-1]:
            raise InvalidContoursError(f"Ring {index} is not closed")
        for coordinate in ring:
            _check_in_range(coordinate)


def _check_in_range(coordinate: Coordinate) -> None:
    lon, lat = coordinate
    # Written as inclusion tests so that NaN is rejected.
    if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE and MIN_LATITUDE <= lat <= MAX_LATITUDE):
        raise CoordinatesOutOfRangeError(f"Coordinates out of range: [{lon}, {lat}]")
