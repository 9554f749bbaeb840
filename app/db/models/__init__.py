from app.db.models.point import Point
from app.db.models.contour import Contour

__all__ = ["Point", "Contour"]
