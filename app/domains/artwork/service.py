from typing import List, Optional

from app.domains.artwork import schemas
from app.domains.artwork.models import Artwork
from app.shared.database.store import MemoryStore


class ArtworkService:
    def __init__(self, store: MemoryStore):
        self.store = store

    def get_artwork(self, artwork_id: int) -> Optional[Artwork]:
        """Get artwork by ID"""
        return self.store.get_artwork(artwork_id)

    def get_artwork_detail(self, artwork_id: int) -> Optional[schemas.ArtworkDetailResponse]:
        """Get artwork by ID together with its artist, if the artist still resolves"""
        artwork = self.store.get_artwork(artwork_id)
        if not artwork:
            return None
        return schemas.ArtworkDetailResponse(
            artwork=artwork,
            artist=self.store.get_artist(artwork.artist_id),
        )

    def list_artworks(self, limit: Optional[int] = None) -> List[Artwork]:
        """List approved artworks in creation order"""
        return self.store.get_artworks(limit)
