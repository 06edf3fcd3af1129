from typing import Optional

from pydantic import Field

from app.shared.utils.schema import CamelModel


class ArtistCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    biography: Optional[str] = None
    profile_image: Optional[str] = Field(default=None, max_length=500)
    cover_image: Optional[str] = Field(default=None, max_length=500)
    wallet_address: str = Field(..., min_length=1)
    user_id: Optional[int] = None
    artwork_count: Optional[int] = Field(default=None, ge=0)
    likes_count: Optional[int] = Field(default=None, ge=0)
