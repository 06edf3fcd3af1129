import enum
from datetime import datetime
from typing import Optional

from app.shared.utils.schema import Record

UNKNOWN_TOKEN_ID = "unknown"


class SubmissionStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ArtworkSubmission(Record):
    title: str
    description: Optional[str] = None
    category: str
    price: Optional[float] = None
    artist_name: str
    artist_email: str
    wallet_address: Optional[str] = None
    image_file_name: Optional[str] = None
    status: SubmissionStatus = SubmissionStatus.PENDING
    created_at: datetime


class NftSubmission(Record):
    world_of_v_link: str
    wallet_address: str
    token_id: str = UNKNOWN_TOKEN_ID
    status: SubmissionStatus = SubmissionStatus.PENDING
    created_at: datetime
