from geoalchemy2 import Geometry
from sqlalchemy import Column, Integer

from app.db.base import Base, SRID


class Contour(Base):
    __tablename__ = "contours"

    id = Column(Integer, primary_key=True, index=True)
    data = Column(
        Geometry(geometry_type="POLYGON", srid=SRID, spatial_index=False),
        nullable=False,
    )
