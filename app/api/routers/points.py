from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_page_cursor, require_access_token
from app.core.config import settings
from app.domain.pagination import PageCursor
from app.schemas.pagination import ListResponse
from app.schemas.point import Point, PointCreate, PointUpdate
from app.services.geometry import (
    create_point,
    delete_point,
    get_point_by_id,
    get_points_by_contour_id,
    list_points,
    update_point,
)

router = APIRouter(prefix="/points", tags=["points"])


@router.post("", response_model=Point, status_code=status.HTTP_201_CREATED)
def create_new_point(
    point_data: PointCreate,
    db: Session = Depends(get_db),
    _token: dict = Depends(require_access_token),
):
    """
    Create a new point. Longitude must be in [-180, 180], latitude in [-90, 90].
    """
    point = create_point(db, point_data.data)
    return Point.model_validate(point)


@router.get("", response_model=ListResponse[Point])
def get_points(
    request: Request,
    contour: int | None = Query(None, description="Only points lying inside this contour"),
    cursor: PageCursor = Depends(get_page_cursor),
    db: Session = Depends(get_db),
):
    """
    Get a page of points, newest first.

    Optional query parameters:
    - page: zero-based page number
    - contour: return every point inside the contour with this ID instead
    """
    if contour is not None:
        points = get_points_by_contour_id(db, contour)
    else:
        points = list_points(db, cursor)

    base_url = f"{settings.host}{request.url.path}"
    return ListResponse[Point](
        count=len(points),
        next=cursor.next_url(base_url),
        previous=cursor.previous_url(base_url),
        results=[Point.model_validate(p) for p in points],
    )


@router.get("/{point_id}", response_model=Point)
def get_point(
    point_id: int,
    db: Session = Depends(get_db),
):
    """
    Get a point by ID.
    """
    return Point.model_validate(get_point_by_id(db, point_id))


@router.put("/{point_id}", response_model=Point)
def update_point_by_id(
    point_id: int,
    point_data: PointUpdate,
    db: Session = Depends(get_db),
    _token: dict = Depends(require_access_token),
):
    """
    Replace the geometry of a point.
    """
    point = update_point(db, point_id, point_data.data)
    return Point.model_validate(point)


@router.delete("/{point_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_point_by_id(
    point_id: int,
    db: Session = Depends(get_db),
    _token: dict = Depends(require_access_token),
):
    """
    Delete a point by ID. Deleting a point that does not exist succeeds.
    """
    delete_point(db, point_id)
