import os

# Set environment variables BEFORE any imports that might use settings.
# The engine is created lazily, so no database is opened by the unit tests.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["HOST"] = "http://localhost"
os.environ["LOG_FORMAT"] = "text"

import pytest
from fastapi.testclient import TestClient

import app.repositories.contour as contour_repo
import app.repositories.point as point_repo
from app.core.security import create_access_token
from app.domain.codec import to_store_literal
from app.domain.entities import ContourRecord, PointRecord
from app.domain.geometry import Geometry
from app.main import app


class InMemorySpatialStore:
    """Stand-in for the PostGIS repositories.

    Spatial predicates are not computed: tests declare which points lie in
    which contour (``within``) and what an intersection query returns
    (``intersections``).
    """

    def __init__(self):
        self.points: dict[int, Geometry] = {}
        self.contours: dict[int, Geometry] = {}
        self.within: dict[int, list[int]] = {}
        self.intersections: dict[tuple[int, int], list[Geometry]] = {}
        self.intersection_queries: list[tuple[int, int]] = []
        self._next_id = 1

    def _insert(self, table: dict, geometry: Geometry) -> int:
        # Same literal the real repository would send to the store.
        to_store_literal(geometry)
        new_id = self._next_id
        self._next_id += 1
        table[new_id] = geometry
        return new_id

    def _replace(self, table: dict, entity_id: int, geometry: Geometry) -> int:
        if entity_id not in table:
            return 0
        to_store_literal(geometry)
        table[entity_id] = geometry
        return 1

    @staticmethod
    def _page(table: dict, record_cls, offset: int, limit: int):
        ids = sorted(table, reverse=True)[offset:offset + limit]
        return [record_cls(id=i, data=table[i]) for i in ids]

    # point repository
    def create_point(self, db, geometry):
        return self._insert(self.points, geometry)

    def get_point_by_id(self, db, point_id):
        if point_id not in self.points:
            return PointRecord()
        return PointRecord(id=point_id, data=self.points[point_id])

    def get_points(self, db, offset, limit):
        return self._page(self.points, PointRecord, offset, limit)

    def replace_point(self, db, point_id, geometry):
        return self._replace(self.points, point_id, geometry)

    def delete_point(self, db, point_id):
        self.points.pop(point_id, None)

    def get_points_within_contour(self, db, contour_id):
        if contour_id not in self.contours:
            return []
        ids = sorted(self.within.get(contour_id, []), reverse=True)
        return [PointRecord(id=i, data=self.points[i]) for i in ids if i in self.points]

    # contour repository
    def create_contour(self, db, geometry):
        return self._insert(self.contours, geometry)

    def get_contour_by_id(self, db, contour_id):
        if contour_id not in self.contours:
            return ContourRecord()
        return ContourRecord(id=contour_id, data=self.contours[contour_id])

    def get_contours(self, db, offset, limit):
        return self._page(self.contours, ContourRecord, offset, limit)

    def replace_contour(self, db, contour_id, geometry):
        return self._replace(self.contours, contour_id, geometry)

    def delete_contour(self, db, contour_id):
        self.contours.pop(contour_id, None)

    def get_contours_intersection(self, db, contour_id_a, contour_id_b):
        self.intersection_queries.append((contour_id_a, contour_id_b))
        return list(self.intersections.get((contour_id_a, contour_id_b), []))


@pytest.fixture(scope="function")
def store(monkeypatch) -> InMemorySpatialStore:
    """Replace the repository functions with an in-memory store."""
    fake = InMemorySpatialStore()
    for name in (
        "create_point",
        "get_point_by_id",
        "get_points",
        "replace_point",
        "delete_point",
        "get_points_within_contour",
    ):
        monkeypatch.setattr(point_repo, name, getattr(fake, name))
    for name in (
        "create_contour",
        "get_contour_by_id",
        "get_contours",
        "replace_contour",
        "delete_contour",
        "get_contours_intersection",
    ):
        monkeypatch.setattr(contour_repo, name, getattr(fake, name))
    return fake


@pytest.fixture(scope="function")
def db():
    """Session placeholder; the in-memory store never touches it."""
    return object()


@pytest.fixture(scope="function")
def client(store, db):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def access_token() -> str:
    return create_access_token(data={"sub": "tests"})


@pytest.fixture(scope="function")
def auth_headers(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}
