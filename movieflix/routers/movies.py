"""Movie catalog endpoints: paginated listing and detail lookup."""

import logging

from fastapi import APIRouter, Depends, Query

from movieflix.config import settings
from movieflix.models import MovieDetail, MovieSummary, Page
from movieflix.security import get_principal
from movieflix.services.auth import CATALOG_READERS, Principal
from movieflix.services.catalog import CatalogService
from movieflix.services.query import GenreFilter, PageRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])

_catalog: CatalogService | None = None


def init_router(catalog: CatalogService) -> None:
    global _catalog
    _catalog = catalog


def _get_catalog() -> CatalogService:
    assert _catalog is not None, "movies router not initialized"
    return _catalog


@router.get("", response_model=Page[MovieSummary])
def list_movies(
    genre_id: int | None = Query(None, alias="genreId", description="Filter by genre id; 0 means all genres"),
    page: int = Query(0, description="Zero-based page index"),
    size: int = Query(settings.default_page_size, description="Results per page"),
    sort: list[str] | None = Query(None, description="Sort as field[,asc|desc]; fields: id, title, year"),
    principal: Principal | None = Depends(get_principal),
):
    """List movies ordered by title, optionally restricted to one genre."""
    def query_page() -> Page[MovieSummary]:
        page_request = PageRequest.of(page, size, sort, max_size=settings.max_page_size)
        return _get_catalog().find_movies(GenreFilter.of(genre_id), page_request)

    return CATALOG_READERS(principal, query_page)


@router.get("/{movie_id}", response_model=MovieDetail)
def get_movie(
    movie_id: int,
    principal: Principal | None = Depends(get_principal),
):
    """Get full details for a single movie, including its genre."""
    return CATALOG_READERS(principal, _get_catalog().find_movie, movie_id)
