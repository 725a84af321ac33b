"""Pydantic response schemas for the MovieFlix catalog API.

Catalog schemas are immutable and serialize with camelCase keys
(``subTitle``, ``imgUrl``, ``totalElements``...); system schemas are plain.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }


# Catalog value objects

class GenreDTO(CamelModel):
    id: int
    name: str


class MovieSummary(CamelModel):
    id: int
    title: str
    sub_title: str | None = None
    year: int | None = None
    img_url: str | None = None


class MovieDetail(MovieSummary):
    synopsis: str | None = None
    genre: GenreDTO


class Page(CamelModel, Generic[T]):
    content: list[T]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def of(cls, content: list[T], number: int, size: int, total_elements: int) -> "Page[T]":
        total_pages = -(-total_elements // size)
        return cls(
            content=content,
            total_elements=total_elements,
            total_pages=total_pages,
            number=number,
            size=size,
            number_of_elements=len(content),
            first=number == 0,
            last=number + 1 >= total_pages,
            empty=not content,
        )


# System

class HealthResponse(BaseModel):
    status: str
    database: bool
