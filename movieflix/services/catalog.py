"""Catalog read operations: movie pages, movie detail and genre listing."""

import logging
from typing import Protocol

from movieflix.errors import NotFound
from movieflix.models import GenreDTO, MovieDetail, MovieSummary, Page
from movieflix.services.query import GenreFilter, PageRequest

logger = logging.getLogger(__name__)


class MovieRepository(Protocol):
    def find_movies(
        self, genre_filter: GenreFilter, page_request: PageRequest
    ) -> tuple[list[dict], int]: ...

    def find_movie(self, movie_id: int) -> dict | None: ...

    def find_genres(self) -> list[dict]: ...


def _to_detail(row: dict) -> MovieDetail:
    return MovieDetail(
        id=row["id"],
        title=row["title"],
        sub_title=row["sub_title"],
        year=row["year"],
        img_url=row["img_url"],
        synopsis=row["synopsis"],
        genre=GenreDTO(id=row["genre_id"], name=row["genre_name"]),
    )


class CatalogService:
    def __init__(self, repository: MovieRepository):
        self._repository = repository

    def find_movies(
        self, genre_filter: GenreFilter, page_request: PageRequest
    ) -> Page[MovieSummary]:
        rows, total = self._repository.find_movies(genre_filter, page_request)
        logger.debug(
            "Movie page %d (size %d, genre=%s): %d of %d",
            page_request.page, page_request.size, genre_filter.genre_id,
            len(rows), total,
        )
        return Page[MovieSummary].of(
            content=[MovieSummary(**row) for row in rows],
            number=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    def find_movie(self, movie_id: int) -> MovieDetail:
        row = self._repository.find_movie(movie_id)
        if row is None:
            raise NotFound(f"Movie {movie_id} not found")
        return _to_detail(row)

    def find_genres(self) -> list[GenreDTO]:
        """All genres, unpaged."""
        return [GenreDTO(**row) for row in self._repository.find_genres()]
