import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.domains.artist import models
from app.domains.artist.service import ArtistService
from app.domains.artwork.models import Artwork
from app.shared.database.store import MemoryStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/artists", tags=["artist"])


@router.get("", response_model=List[models.Artist])
def list_artists(
    limit: Optional[int] = Query(None, ge=1),
    store: MemoryStore = Depends(get_store),
):
    """
    List artist profiles in creation order
    """
    service = ArtistService(store)
    try:
        return service.list_artists(limit=limit)
    except Exception:
        logger.exception("Failed to fetch artists")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch artists",
        )


@router.get("/by-wallet/{wallet_address}", response_model=models.Artist)
def get_artist_by_wallet(
    wallet_address: str,
    store: MemoryStore = Depends(get_store),
):
    """
    Get the artist profile bound to a wallet

    **Possible errors:**
    - 404: Artist not found
    """
    service = ArtistService(store)
    artist = service.get_artist_by_wallet(wallet_address)
    if not artist:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Artist not found"
        )
    return artist


@router.get("/{artist_id}", response_model=models.Artist)
def get_artist(
    artist_id: int,
    store: MemoryStore = Depends(get_store),
):
    """
    Get artist profile by ID

    **Possible errors:**
    - 404: Artist not found
    """
    service = ArtistService(store)
    artist = service.get_artist(artist_id)
    if not artist:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Artist not found"
        )
    return artist


@router.get("/{artist_id}/artworks", response_model=List[Artwork])
def list_artist_artworks(
    artist_id: int,
    store: MemoryStore = Depends(get_store),
):
    """
    List every artwork of an artist, approved or not

    An unknown artist has no artworks, so this returns an empty list rather
    than 404.
    """
    service = ArtistService(store)
    try:
        return service.list_artist_artworks(artist_id)
    except Exception:
        logger.exception("Failed to fetch artworks of artist %s", artist_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch artist's artworks",
        )
