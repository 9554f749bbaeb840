from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import Session

from app.db.models.contour import Contour as ContourModel
from app.db.models.point import Point as PointModel
from app.domain.codec import geometry_from_store_text
from app.domain.entities import PointRecord
from app.domain.geometry import Geometry
from app.repositories.spatial import as_geojson, geometry_expression


def _select_points():
    return select(PointModel.id, as_geojson(PointModel.data))


def _to_record(row) -> PointRecord:
    return PointRecord(id=row.id, data=geometry_from_store_text(row.data))


def create_point(db: Session, geometry: Geometry) -> int:
    """Insert a point and return its new ID."""
    stmt = (
        insert(PointModel)
        .values(data=geometry_expression(geometry))
        .returning(PointModel.id)
    )
    point_id = db.execute(stmt).scalar_one()
    db.commit()
    return point_id


def get_point_by_id(db: Session, point_id: int) -> PointRecord:
    """Get a point by ID. A record with ``id == 0`` means no such point."""
    row = db.execute(_select_points().where(PointModel.id == point_id)).first()
    if row is None:
        return PointRecord()
    return _to_record(row)


def get_points(db: Session, offset: int, limit: int) -> list[PointRecord]:
    """Get a page of points, newest first."""
    stmt = _select_points().order_by(PointModel.id.desc()).offset(offset).limit(limit)
    return [_to_record(row) for row in db.execute(stmt)]


def replace_point(db: Session, point_id: int, geometry: Geometry) -> int:
    """Overwrite the geometry of a point. Returns the number of rows changed."""
    stmt = (
        update(PointModel)
        .where(PointModel.id == point_id)
        .values(data=geometry_expression(geometry))
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount


def delete_point(db: Session, point_id: int) -> None:
    """Delete a point. Deleting a missing point is a no-op."""
    db.execute(delete(PointModel).where(PointModel.id == point_id))
    db.commit()


def get_points_within_contour(db: Session, contour_id: int) -> list[PointRecord]:
    """Get every point lying inside the given contour."""
    stmt = (
        _select_points()
        .join(ContourModel, func.ST_Within(PointModel.data, ContourModel.data))
        .where(ContourModel.id == contour_id)
        .order_by(PointModel.id.desc())
    )
    return [_to_record(row) for row in db.execute(stmt)]
