from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """Generic list response with links to the neighbouring pages."""

    count: int
    next: str | None
    previous: str | None
    results: list[T]
