from typing import Optional

from app.shared.utils.schema import Record


class Artist(Record):
    name: str
    biography: Optional[str] = None
    profile_image: Optional[str] = None
    cover_image: Optional[str] = None
    wallet_address: str
    # Weak reference to users; not checked on insert
    user_id: Optional[int] = None
    artwork_count: int = 0
    likes_count: int = 0
