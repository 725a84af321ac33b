"""Genre reference data. Deliberately unpaged: the full set is small."""

from fastapi import APIRouter, Depends

from movieflix.models import GenreDTO
from movieflix.security import get_principal
from movieflix.services.auth import CATALOG_READERS, Principal
from movieflix.services.catalog import CatalogService

router = APIRouter(prefix="/genres", tags=["genres"])

_catalog: CatalogService | None = None


def init_router(catalog: CatalogService) -> None:
    global _catalog
    _catalog = catalog


def _get_catalog() -> CatalogService:
    assert _catalog is not None, "genres router not initialized"
    return _catalog


@router.get("", response_model=list[GenreDTO])
def list_genres(principal: Principal | None = Depends(get_principal)):
    return CATALOG_READERS(principal, _get_catalog().find_genres)
