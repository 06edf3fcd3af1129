from datetime import datetime
from typing import Optional

from pydantic import Field

from app.domains.artist.models import Artist
from app.domains.artwork.models import Artwork
from app.shared.utils.schema import CamelModel


class ArtworkCreate(CamelModel):
    """Artwork creation data. Unset ``created_at``/``is_approved`` take store defaults."""
    title: str = Field(..., min_length=1, description="Artwork title")
    description: Optional[str] = Field(None, description="Artwork description")
    image_url: str = Field(..., description="Image URL")
    category: str = Field(..., min_length=1, description="Category tag")
    price: Optional[float] = Field(None, ge=0, description="Listing price")
    token_id: Optional[str] = Field(None, description="External NFT token id")
    artist_id: int = Field(..., description="Owning artist id")
    created_at: Optional[datetime] = None
    is_approved: Optional[bool] = None


class ArtworkDetailResponse(CamelModel):
    """Artwork joined with its artist for display; ``artist`` is None when unresolved"""
    artwork: Artwork
    artist: Optional[Artist] = None
