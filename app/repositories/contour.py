from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import Session, aliased

from app.db.models.contour import Contour as ContourModel
from app.domain.codec import geometry_from_store_text
from app.domain.entities import ContourRecord
from app.domain.geometry import Geometry
from app.repositories.spatial import as_geojson, geometry_expression


def _select_contours():
    return select(ContourModel.id, as_geojson(ContourModel.data))


def _to_record(row) -> ContourRecord:
    return ContourRecord(id=row.id, data=geometry_from_store_text(row.data))


def create_contour(db: Session, geometry: Geometry) -> int:
    """Insert a contour and return its new ID."""
    stmt = (
        insert(ContourModel)
        .values(data=geometry_expression(geometry))
        .returning(ContourModel.id)
    )
    contour_id = db.execute(stmt).scalar_one()
    db.commit()
    return contour_id


def get_contour_by_id(db: Session, contour_id: int) -> ContourRecord:
    """Get a contour by ID. A record with ``id == 0`` means no such contour."""
    row = db.execute(_select_contours().where(ContourModel.id == contour_id)).first()
    if row is None:
        return ContourRecord()
    return _to_record(row)


def get_contours(db: Session, offset: int, limit: int) -> list[ContourRecord]:
    """Get a page of contours, newest first."""
    stmt = (
        _select_contours()
        .order_by(ContourModel.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return [_to_record(row) for row in db.execute(stmt)]


def replace_contour(db: Session, contour_id: int, geometry: Geometry) -> int:
    """Overwrite the geometry of a contour. Returns the number of rows changed."""
    stmt = (
        update(ContourModel)
        .where(ContourModel.id == contour_id)
        .values(data=geometry_expression(geometry))
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount


def delete_contour(db: Session, contour_id: int) -> None:
    """Delete a contour. Deleting a missing contour is a no-op."""
    db.execute(delete(ContourModel).where(ContourModel.id == contour_id))
    db.commit()


def get_contours_intersection(
    db: Session, contour_id_a: int, contour_id_b: int
) -> list[Geometry]:
    """
    Get the raw intersection of two contours as computed by PostGIS.

    The result is whatever ST_Intersection produces: a polygon, an empty
    polygon, a multipolygon, or a lower-dimension geometry when the contours
    only touch. Callers decide what to keep.
    """
    contour_a = aliased(ContourModel)
    contour_b = aliased(ContourModel)
    stmt = (
        select(func.ST_AsGeoJSON(func.ST_Intersection(contour_a.data, contour_b.data)))
        .select_from(contour_a)
        .join(contour_b, contour_b.id == contour_id_b)
        .where(contour_a.id == contour_id_a)
    )
    return [geometry_from_store_text(raw) for raw in db.execute(stmt).scalars()]
