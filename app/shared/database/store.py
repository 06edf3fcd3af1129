import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import Request

from app.domains.artist.models import Artist
from app.domains.artist.schemas import ArtistCreate
from app.domains.artwork.models import Artwork
from app.domains.artwork.schemas import ArtworkCreate
from app.domains.submissions.models import ArtworkSubmission, NftSubmission
from app.domains.users.models import User
from app.domains.users.schemas import UserCreate
from app.shared.database.table import Table

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStore:
    """
    Process-local store for every entity type.

    Nothing is persisted; a restart starts from an empty store (plus whatever
    the seeder adds). Relations are plain ids and are never checked on write,
    so lookups through them may come back empty.
    """

    def __init__(self, default_artwork_approved: bool = True):
        self.default_artwork_approved = default_artwork_approved
        self.seeded = False

        self.users: Table[User] = Table("users")
        self.artists: Table[Artist] = Table("artists")
        self.artworks: Table[Artwork] = Table("artworks")
        self.submissions: Table[ArtworkSubmission] = Table("artwork_submissions")
        self.nft_submissions: Table[NftSubmission] = Table("nft_submissions")

        # Wallets seen through the login path, in first-seen order
        self._logged_in_wallets: Dict[str, None] = {}

    def counts(self) -> Dict[str, int]:
        tables = (
            self.users,
            self.artists,
            self.artworks,
            self.submissions,
            self.nft_submissions,
        )
        return {table.name: len(table) for table in tables}

    # Users

    def create_user(self, data: UserCreate) -> User:
        user = self.users.insert(
            lambda user_id: User(
                id=user_id,
                username=data.username,
                wallet_address=data.wallet_address or None,
            )
        )
        logger.debug("Created user %s (%s)", user.id, user.username)
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    def get_user_by_wallet_address(self, wallet_address: str) -> Optional[User]:
        return self.users.find(lambda user: user.wallet_address == wallet_address)

    def get_users(self, limit: Optional[int] = None) -> List[User]:
        return self.users.all(limit)

    def get_or_create_user_by_wallet(self, wallet_address: str) -> User:
        with self.users.lock:
            user = self.get_user_by_wallet_address(wallet_address)
            if user is None:
                user = self.users.insert(
                    lambda user_id: User(
                        id=user_id,
                        username=self._free_username(user_id),
                        wallet_address=wallet_address,
                    )
                )
                logger.debug("Created user %s for wallet %s", user.id, wallet_address)
            return user

    def _free_username(self, user_id: int) -> str:
        # User<id>, or the next User<n> not already claimed; caller holds users.lock
        n = user_id
        while self.get_user_by_username(f"User{n}") is not None:
            n += 1
        return f"User{n}"

    def log_wallet_login(self, wallet_address: str) -> None:
        with self.users.lock:
            self._logged_in_wallets.setdefault(wallet_address, None)

    def get_logged_in_wallets(self) -> List[str]:
        with self.users.lock:
            return list(self._logged_in_wallets)

    # Artists

    def create_artist(self, data: ArtistCreate) -> Artist:
        artist = self.artists.insert(
            lambda artist_id: Artist(
                id=artist_id,
                name=data.name,
                biography=data.biography,
                profile_image=data.profile_image,
                cover_image=data.cover_image,
                wallet_address=data.wallet_address,
                user_id=data.user_id,
                artwork_count=data.artwork_count or 0,
                likes_count=data.likes_count or 0,
            )
        )
        logger.debug("Created artist %s (%s)", artist.id, artist.name)
        return artist

    def get_artist(self, artist_id: int) -> Optional[Artist]:
        return self.artists.get(artist_id)

    def get_artist_by_wallet_address(self, wallet_address: str) -> Optional[Artist]:
        return self.artists.find(lambda artist: artist.wallet_address == wallet_address)

    def get_artists(self, limit: Optional[int] = None) -> List[Artist]:
        return self.artists.all(limit)

    # Artworks

    def create_artwork(self, data: ArtworkCreate) -> Artwork:
        is_approved = data.is_approved
        if is_approved is None:
            is_approved = self.default_artwork_approved

        artwork = self.artworks.insert(
            lambda artwork_id: Artwork(
                id=artwork_id,
                title=data.title,
                description=data.description,
                image_url=data.image_url,
                category=data.category,
                price=data.price,
                token_id=data.token_id,
                artist_id=data.artist_id,
                created_at=data.created_at or utcnow(),
                is_approved=is_approved,
            )
        )

        # Soft reference: a missing artist is skipped, not an error
        with self.artists.lock:
            artist = self.artists.get(artwork.artist_id)
            if artist is not None:
                self.artists.update(artist.id, artwork_count=artist.artwork_count + 1)
            else:
                logger.debug(
                    "Artwork %s references unknown artist %s",
                    artwork.id,
                    artwork.artist_id,
                )
        return artwork

    def get_artwork(self, artwork_id: int) -> Optional[Artwork]:
        return self.artworks.get(artwork_id)

    def get_artworks_by_artist_id(self, artist_id: int) -> List[Artwork]:
        return self.artworks.filter(lambda artwork: artwork.artist_id == artist_id)

    def get_artworks(self, limit: Optional[int] = None) -> List[Artwork]:
        approved = self.artworks.filter(lambda artwork: artwork.is_approved)
        if limit is not None:
            return approved[:limit]
        return approved


def get_store(request: Request) -> MemoryStore:
    return request.app.state.store
