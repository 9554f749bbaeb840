import logging

from sqlalchemy.orm import Session

import app.repositories.contour as contour_repo
import app.repositories.point as point_repo
from app.domain.entities import ContourRecord, PointRecord, SpatialEntity
from app.domain.geometry import Geometry, PointGeometry, PolygonGeometry
from app.domain.intersection import decompose_intersection
from app.domain.pagination import PageCursor
from app.domain.validation import validate_geometry
from app.errors import (
    DomainValidationError,
    InvalidContoursError,
    InvalidPointError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def _check_point(geometry: Geometry) -> None:
    try:
        validate_geometry(geometry, expected=PointGeometry)
    except DomainValidationError as e:
        logger.warning("Rejected point geometry: %s", e)
        raise InvalidPointError(f"Invalid point: {e}") from e


def _check_contour(geometry: Geometry) -> None:
    try:
        validate_geometry(geometry, expected=PolygonGeometry)
    except DomainValidationError as e:
        logger.warning("Rejected contour geometry: %s", e)
        raise InvalidContoursError(f"Invalid contours: {e}") from e


def _require_found(record: SpatialEntity, message: str):
    # The store reports a missing row as a record whose id is zero.
    if not record.is_persisted:
        raise NotFoundError(message)
    return record


# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------


def create_point(db: Session, geometry: Geometry) -> PointRecord:
    """
    Create a point after validating its geometry.

    Raises:
        InvalidPointError: If the geometry is not an in-range Point
    """
    _check_point(geometry)
    point_id = point_repo.create_point(db, geometry)
    logger.info("Created point %s", point_id)
    return PointRecord(id=point_id, data=geometry)


def get_point_by_id(db: Session, point_id: int) -> PointRecord:
    """
    Raises:
        NotFoundError: If the point doesn't exist
    """
    return _require_found(point_repo.get_point_by_id(db, point_id), "Point not found")


def list_points(db: Session, cursor: PageCursor) -> list[PointRecord]:
    """List one page of points, newest first."""
    return point_repo.get_points(db, offset=cursor.offset, limit=cursor.limit)


def update_point(db: Session, point_id: int, geometry: Geometry) -> PointRecord:
    """
    Replace the geometry of an existing point.

    Raises:
        InvalidPointError: If the geometry is not an in-range Point
        NotFoundError: If the point doesn't exist
    """
    _check_point(geometry)
    if point_repo.replace_point(db, point_id, geometry) == 0:
        raise NotFoundError("Point not found")
    logger.info("Updated point %s", point_id)
    return PointRecord(id=point_id, data=geometry)


def delete_point(db: Session, point_id: int) -> None:
    """Delete a point. Deleting a missing point succeeds."""
    point_repo.delete_point(db, point_id)
    logger.info("Deleted point %s", point_id)


def get_points_by_contour_id(db: Session, contour_id: int) -> list[PointRecord]:
    """
    List the points lying inside a contour.

    A missing contour is not an error: it simply contains no points.
    """
    return point_repo.get_points_within_contour(db, contour_id)


# ---------------------------------------------------------------------------
# Contours
# ---------------------------------------------------------------------------


def create_contour(db: Session, geometry: Geometry) -> ContourRecord:
    """
    Create a contour after validating its geometry.

    - Only Polygon geometries are accepted
    - Every ring must be closed, have at least 2 positions and stay in range

    Raises:
        InvalidContoursError: If the geometry breaks any of the rules above
    """
    _check_contour(geometry)
    contour_id = contour_repo.create_contour(db, geometry)
    logger.info("Created contour %s", contour_id)
    return ContourRecord(id=contour_id, data=geometry)


def get_contour_by_id(db: Session, contour_id: int) -> ContourRecord:
    """
    Raises:
        NotFoundError: If the contour doesn't exist
    """
    return _require_found(
        contour_repo.get_contour_by_id(db, contour_id), "Contour not found"
    )


def list_contours(db: Session, cursor: PageCursor) -> list[ContourRecord]:
    """List one page of contours, newest first."""
    return contour_repo.get_contours(db, offset=cursor.offset, limit=cursor.limit)


def update_contour(db: Session, contour_id: int, geometry: Geometry) -> ContourRecord:
    """
    Replace the geometry of an existing contour.

    The whole geometry is swapped; there is no partial update. A missing
    contour is reported, never created.

    Raises:
        InvalidContoursError: If the new geometry is not a valid Polygon
        NotFoundError: If the contour doesn't exist
    """
    _check_contour(geometry)
    if contour_repo.replace_contour(db, contour_id, geometry) == 0:
        raise NotFoundError("Contour not found")
    logger.info("Updated contour %s", contour_id)
    return ContourRecord(id=contour_id, data=geometry)


def delete_contour(db: Session, contour_id: int) -> None:
    """Delete a contour. Deleting a missing contour succeeds."""
    contour_repo.delete_contour(db, contour_id)
    logger.info("Deleted contour %s", contour_id)


def get_contours_intersection(
    db: Session, contour_id_a: int, contour_id_b: int
) -> list[ContourRecord]:
    """
    Intersect two contours and return the result as flat polygon records.

    Both contours must exist before the spatial query is issued. An empty
    intersection gives an empty list. The records have no id.

    Raises:
        NotFoundError: If either contour doesn't exist
    """
    get_contour_by_id(db, contour_id_a)
    get_contour_by_id(db, contour_id_b)

    rows = contour_repo.get_contours_intersection(db, contour_id_a, contour_id_b)
    return decompose_intersection(rows)
