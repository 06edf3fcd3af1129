from datetime import datetime
from typing import Optional

from pydantic import Field

from app.shared.utils.schema import Record


class Artwork(Record):
    title: str
    description: Optional[str] = None
    image_url: str                                  # S3/IPFS/CDN URL
    category: str                                   # free-text tag, e.g. "abstract"
    price: Optional[float] = Field(default=None, ge=0)
    token_id: Optional[str] = None                  # external NFT token id
    artist_id: int                                  # not checked on insert
    created_at: datetime
    is_approved: bool
