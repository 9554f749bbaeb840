from fastapi import APIRouter

from app.api.routers import points, contours, intersections

api_router = APIRouter()

api_router.include_router(points.router)
api_router.include_router(contours.router)
api_router.include_router(intersections.router)
