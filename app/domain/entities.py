from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.geometry import Geometry, UnknownGeometry


@dataclass(slots=True)
class SpatialEntity:
    """An identity plus a geometry.

    ``id == 0`` means the entity has not been persisted, or, for a row read
    back from the store, that no row matched.
    """

    id: int = 0
    data: Geometry = field(default_factory=UnknownGeometry)

    @property
    def is_persisted(self) -> bool:
        return self.id != 0


@dataclass(slots=True)
class PointRecord(SpatialEntity):
    pass


@dataclass(slots=True)
class ContourRecord(SpatialEntity):
    pass
