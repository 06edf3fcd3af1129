import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.domains.artwork import schemas
from app.domains.artwork.models import Artwork
from app.domains.artwork.service import ArtworkService
from app.shared.database.store import MemoryStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/artworks", tags=["artwork"])


@router.get("", response_model=List[Artwork])
def list_artworks(
    limit: Optional[int] = Query(None, ge=1),
    store: MemoryStore = Depends(get_store),
):
    """List approved artworks"""
    service = ArtworkService(store)
    try:
        return service.list_artworks(limit=limit)
    except Exception:
        logger.exception("Failed to fetch artworks")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch artworks",
        )


@router.get("/{artwork_id}", response_model=Artwork)
def get_artwork(
    artwork_id: int,
    store: MemoryStore = Depends(get_store),
):
    """Get artwork by ID"""
    service = ArtworkService(store)
    artwork = service.get_artwork(artwork_id)
    if not artwork:
        raise HTTPException(status_code=404, detail="Artwork not found")
    return artwork


@router.get("/{artwork_id}/detail", response_model=schemas.ArtworkDetailResponse)
def get_artwork_detail(
    artwork_id: int,
    store: MemoryStore = Depends(get_store),
):
    """Get artwork by ID with its artist (null when the artist no longer resolves)"""
    service = ArtworkService(store)
    detail = service.get_artwork_detail(artwork_id)
    if not detail:
        raise HTTPException(status_code=404, detail="Artwork not found")
    return detail
