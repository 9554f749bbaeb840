from geoalchemy2 import Geometry
from sqlalchemy import Column, Integer

from app.db.base import Base, SRID


class Point(Base):
    __tablename__ = "points"

    id = Column(Integer, primary_key=True, index=True)
    data = Column(
        Geometry(geometry_type="POINT", srid=SRID, spatial_index=False),
        nullable=False,
    )
