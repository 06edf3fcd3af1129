from typing import Optional

from app.shared.utils.schema import CamelModel


class NftSubmissionCounts(CamelModel):
    pending: int = 0
    approved: int = 0
    rejected: int = 0


class CollectorSummaryResponse(CamelModel):
    wallet_address: str
    user_id: Optional[int] = None
    artist_id: Optional[int] = None
    nft_submissions: NftSubmissionCounts
    verified_nfts: int
