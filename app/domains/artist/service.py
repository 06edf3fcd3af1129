from typing import List, Optional

from app.domains.artist import models
from app.domains.artwork.models import Artwork
from app.shared.database.store import MemoryStore


class ArtistService:
    def __init__(self, store: MemoryStore):
        self.store = store

    def get_artist(self, artist_id: int) -> Optional[models.Artist]:
        return self.store.get_artist(artist_id)

    def get_artist_by_wallet(self, wallet_address: str) -> Optional[models.Artist]:
        return self.store.get_artist_by_wallet_address(wallet_address)

    def list_artists(self, limit: Optional[int] = None) -> List[models.Artist]:
        return self.store.get_artists(limit)

    def list_artist_artworks(self, artist_id: int) -> List[Artwork]:
        # Includes unapproved artworks; an unknown artist just has none
        return self.store.get_artworks_by_artist_id(artist_id)
