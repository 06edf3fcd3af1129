import logging
from typing import List, Optional, Union

from app.domains.submissions import models, schemas
from app.domains.submissions.models import SubmissionStatus
from app.shared.database.store import MemoryStore, utcnow
from app.shared.errors import NftSubmissionNotFoundError, SubmissionNotFoundError

logger = logging.getLogger(__name__)


class SubmissionService:
    """
    Review pipelines for artwork and NFT submissions.

    Every submission starts out pending and moves between pending, approved
    and rejected only when a reviewer says so; any status may follow any other.
    Approving an artwork submission does not create an artist or artwork.
    """

    def __init__(self, store: MemoryStore):
        self.store = store

    def submit(
        self, request: schemas.SubmitRequest
    ) -> Union[models.ArtworkSubmission, models.NftSubmission]:
        payload = request.root
        if isinstance(payload, schemas.NftSubmissionRequest):
            return self.submit_nft(payload)
        return self.submit_artwork(payload)

    # Artwork submissions

    def submit_artwork(
        self, payload: schemas.ArtworkSubmissionRequest
    ) -> models.ArtworkSubmission:
        submission = self.store.submissions.insert(
            lambda submission_id: models.ArtworkSubmission(
                id=submission_id,
                title=payload.title,
                description=payload.description or None,
                category=payload.category,
                price=payload.price,
                artist_name=payload.artist_name,
                artist_email=str(payload.artist_email),
                wallet_address=payload.wallet_address or None,
                image_file_name=payload.image_file_name or None,
                status=SubmissionStatus.PENDING,
                created_at=utcnow(),
            )
        )
        logger.info("Artwork submission %s received: %s", submission.id, submission.title)
        return submission

    def get_submission(self, submission_id: int) -> Optional[models.ArtworkSubmission]:
        return self.store.submissions.get(submission_id)

    def get_all_submissions(self) -> List[models.ArtworkSubmission]:
        return self.store.submissions.all()

    def update_submission_status(
        self, submission_id: int, status: SubmissionStatus
    ) -> models.ArtworkSubmission:
        status = SubmissionStatus(status)
        submission = self.store.submissions.update(submission_id, status=status)
        if submission is None:
            raise SubmissionNotFoundError(submission_id)
        logger.info("Artwork submission %s is now %s", submission_id, status.value)
        return submission

    # NFT submissions

    def submit_nft(self, payload: schemas.NftSubmissionRequest) -> models.NftSubmission:
        submission = self.store.nft_submissions.insert(
            lambda submission_id: models.NftSubmission(
                id=submission_id,
                world_of_v_link=payload.world_of_v_link,
                wallet_address=payload.wallet_address,
                token_id=payload.token_id or models.UNKNOWN_TOKEN_ID,
                status=SubmissionStatus.PENDING,
                created_at=utcnow(),
            )
        )
        logger.info(
            "NFT submission %s received from %s", submission.id, submission.wallet_address
        )
        return submission

    def get_nft_submission(self, submission_id: int) -> Optional[models.NftSubmission]:
        return self.store.nft_submissions.get(submission_id)

    def get_all_nft_submissions(self) -> List[models.NftSubmission]:
        return self.store.nft_submissions.all()

    def get_nft_submissions_by_wallet(self, wallet_address: str) -> List[models.NftSubmission]:
        return self.store.nft_submissions.filter(
            lambda submission: submission.wallet_address == wallet_address
        )

    def update_nft_submission_status(
        self, submission_id: int, status: SubmissionStatus
    ) -> models.NftSubmission:
        status = SubmissionStatus(status)
        submission = self.store.nft_submissions.update(submission_id, status=status)
        if submission is None:
            raise NftSubmissionNotFoundError(submission_id)
        logger.info("NFT submission %s is now %s", submission_id, status.value)
        return submission
