from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_page_cursor, require_access_token
from app.core.config import settings
from app.domain.pagination import PageCursor
from app.schemas.contour import Contour, ContourCreate, ContourUpdate
from app.schemas.pagination import ListResponse
from app.services.geometry import (
    create_contour,
    delete_contour,
    get_contour_by_id,
    list_contours,
    update_contour,
)

router = APIRouter(prefix="/contours", tags=["contours"])


@router.post("", response_model=Contour, status_code=status.HTTP_201_CREATED)
def create_new_contour(
    contour_data: ContourCreate,
    db: Session = Depends(get_db),
    _token: dict = Depends(require_access_token),
):
    """
    Create a new contour. Only Polygon geometries with closed rings are accepted.
    """
    contour = create_contour(db, contour_data.data)
    return Contour.model_validate(contour)


@router.get("", response_model=ListResponse[Contour])
def get_contours(
    request: Request,
    cursor: PageCursor = Depends(get_page_cursor),
    db: Session = Depends(get_db),
):
    """
    Get a page of contours, newest first.
    """
    contours = list_contours(db, cursor)

    base_url = f"{settings.host}{request.url.path}"
    return ListResponse[Contour](
        count=len(contours),
        next=cursor.next_url(base_url),
        previous=cursor.previous_url(base_url),
        results=[Contour.model_validate(c) for c in contours],
    )


@router.get("/{contour_id}", response_model=Contour)
def get_contour(
    contour_id: int,
    db: Session = Depends(get_db),
):
    """
    Get a contour by ID.
    """
    return Contour.model_validate(get_contour_by_id(db, contour_id))


@router.put("/{contour_id}", response_model=Contour)
def update_contour_by_id(
    contour_id: int,
    contour_data: ContourUpdate,
    db: Session = Depends(get_db),
    _token: dict = Depends(require_access_token),
):
    """
    Replace the geometry of a contour. The contour must already exist.
    """
    contour = update_contour(db, contour_id, contour_data.data)
    return Contour.model_validate(contour)


@router.delete("/{contour_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contour_by_id(
    contour_id: int,
    db: Session = Depends(get_db),
    _token: dict = Depends(require_access_token),
):
    """
    Delete a contour by ID. Deleting a contour that does not exist succeeds.
    """
    delete_contour(db, contour_id)
