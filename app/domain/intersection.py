from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities import ContourRecord
from app.domain.geometry import (
    Geometry,
    MultiPolygonGeometry,
    PolygonGeometry,
)


def decompose_intersection(rows: Iterable[Geometry]) -> list[ContourRecord]:
    """Flatten the geometries of an intersection query into polygon records.

    - Polygon with rings: kept as is
    - Polygon without rings (empty intersection): dropped
    - MultiPolygon: one polygon record per member, in member order
    - Anything else (e.g. a GeometryCollection of touching edges): dropped

    Records come back in row order and never carry an id.
    """
    results: list[ContourRecord] = []
    for geometry in rows:
        match geometry:
            case PolygonGeometry(rings=rings) if rings:
                results.append(ContourRecord(data=geometry))
            case MultiPolygonGeometry(polygons=polygons):
                results.extend(
                    ContourRecord(data=PolygonGeometry(rings)) for rings in polygons
                )
            case _:
                continue
    return results
