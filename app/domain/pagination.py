from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True, slots=True)
class PageCursor:
    """Offset/limit window for a zero-based page number."""

    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def next_url(self, base_path: str) -> str:
        return build_next_url(base_path, self.page)

    def previous_url(self, base_path: str) -> str | None:
        return build_previous_url(base_path, self.page)


def build_next_url(base_path: str, page: int) -> str:
    # There is no end-of-data check: a short or empty page still links onwards.
    return f"{base_path}?page={page + 1}"


def build_previous_url(base_path: str, page: int) -> str | None:
    if page == 0:
        return None
    return f"{base_path}?page={page - 1}"
