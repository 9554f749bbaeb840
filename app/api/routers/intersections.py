from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.contour import Contour
from app.services.geometry import get_contours_intersection

router = APIRouter(prefix="/intersections", tags=["intersections"])


@router.get("", response_model=list[Contour])
def get_intersection(
    contour_1: int = Query(..., description="ID of the first contour"),
    contour_2: int = Query(..., description="ID of the second contour"),
    db: Session = Depends(get_db),
):
    """
    Get the area shared by two contours as a list of polygons.

    A multi-part intersection is split into one polygon per part. Contours
    that do not overlap give an empty list.
    """
    contours = get_contours_intersection(db, contour_1, contour_2)
    return [Contour.model_validate(c) for c in contours]
