"""SQL expressions shared by the point and contour repositories."""

from sqlalchemy import func

from app.db.base import SRID
from app.domain.codec import to_store_literal
from app.domain.geometry import Geometry


def geometry_expression(geometry: Geometry):
    """``ST_<Kind>FromText('<wkt>', 4326)`` for a storable geometry.

    Raises:
        UnsupportedGeometryError: If the geometry has no WKT column type here.
    """
    literal = to_store_literal(geometry)
    return getattr(func, literal.constructor)(literal.text, SRID)


def as_geojson(column):
    return func.ST_AsGeoJSON(column).label("data")
