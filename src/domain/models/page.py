import math
from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    items: list[T]
    total: int
    current_page: int
    total_pages: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @classmethod
    def empty(cls) -> "Page[T]":
        return cls(items=[], total=0, current_page=1, total_pages=1)


def total_pages(total: int, limit: int) -> int:
    """Number of pages for total items at limit per page; never less than 1."""
    if limit <= 0:
        return 1
    return max(math.ceil(total / limit), 1)
