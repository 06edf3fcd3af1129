from app.domains.collector import schemas
from app.domains.submissions.models import SubmissionStatus
from app.domains.submissions.service import SubmissionService
from app.shared.database.store import MemoryStore


class CollectorService:
    def __init__(self, store: MemoryStore):
        self.store = store

    def get_summary(self, wallet_address: str) -> schemas.CollectorSummaryResponse:
        """
        Summarize a wallet's standing as a collector.

        Read-only: an unseen wallet gets an empty summary rather than a new user.
        Verified NFTs are the wallet's approved NFT submissions.
        """
        user = self.store.get_user_by_wallet_address(wallet_address)
        artist = self.store.get_artist_by_wallet_address(wallet_address)

        counts = {status.value: 0 for status in SubmissionStatus}
        submissions = SubmissionService(self.store).get_nft_submissions_by_wallet(
            wallet_address
        )
        for submission in submissions:
            counts[submission.status.value] += 1

        return schemas.CollectorSummaryResponse(
            wallet_address=wallet_address,
            user_id=user.id if user else None,
            artist_id=artist.id if artist else None,
            nft_submissions=schemas.NftSubmissionCounts(**counts),
            verified_nfts=counts[SubmissionStatus.APPROVED.value],
        )
