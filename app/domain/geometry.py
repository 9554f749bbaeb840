"""Geometry values: one frozen dataclass per supported GeoJSON-style kind.

A geometry is exactly one of the variants below; each variant owns its single
payload slot. Code that needs to branch on the kind uses ``match`` over the
variant classes so that adding a kind shows up everywhere it must be handled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias

Coordinate: TypeAlias = tuple[float, float]
Ring: TypeAlias = tuple[Coordinate, ...]
PolygonRings: TypeAlias = tuple[Ring, ...]


class GeometryKind(str, Enum):
    POINT = "Point"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"


@dataclass(frozen=True, slots=True)
class PointGeometry:
    """A single (longitude, latitude) position."""

    coordinates: Coordinate

    kind: ClassVar[GeometryKind] = GeometryKind.POINT

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """An outer ring followed by zero or more inner rings."""

    rings: PolygonRings

    kind: ClassVar[GeometryKind] = GeometryKind.POLYGON

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class MultiPolygonGeometry:
    polygons: tuple[PolygonRings, ...]

    kind: ClassVar[GeometryKind] = GeometryKind.MULTI_POLYGON

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class UnknownGeometry:
    """A kind this service does not model. Carries the raw type name only.

    ``UnknownGeometry("")`` is the zero value used when the store hands back
    no geometry at all.
    """

    type_name: str = ""


Geometry: TypeAlias = PointGeometry | PolygonGeometry | MultiPolygonGeometry | UnknownGeometry
