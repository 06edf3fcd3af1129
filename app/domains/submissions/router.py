import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.domains.submissions import models, schemas
from app.domains.submissions.service import SubmissionService
from app.shared.database.store import MemoryStore, get_store
from app.shared.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["submissions"])
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/submit", response_model=schemas.SubmitResponse, status_code=status.HTTP_201_CREATED
)
def submit(payload: schemas.SubmitRequest, store: MemoryStore = Depends(get_store)):
    """
    Submit an artwork for review or an NFT for ownership verification

    The body's ``kind`` field picks the pipeline: ``"artwork"`` or ``"nft"``.

    **Possible errors:**
    - 400: Missing/unknown kind or invalid fields
    """
    service = SubmissionService(store)
    try:
        submission = service.submit(payload)
    except Exception:
        logger.exception("Failed to store %s submission", payload.root.kind)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit",
        )

    if payload.root.kind == "nft":
        message = "NFT submission received successfully"
    else:
        message = "Artwork submission received successfully"
    return schemas.SubmitResponse(
        message=message, submission_id=submission.id, kind=payload.root.kind
    )


@admin_router.get("/submissions", response_model=List[models.ArtworkSubmission])
def list_submissions(store: MemoryStore = Depends(get_store)):
    service = SubmissionService(store)
    try:
        return service.get_all_submissions()
    except Exception:
        logger.exception("Failed to fetch submissions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch submissions",
        )


@admin_router.get("/submissions/{submission_id}", response_model=models.ArtworkSubmission)
def get_submission(submission_id: int, store: MemoryStore = Depends(get_store)):
    service = SubmissionService(store)
    submission = service.get_submission(submission_id)
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    return submission


@admin_router.put(
    "/submissions/{submission_id}/status", response_model=models.ArtworkSubmission
)
def update_submission_status(
    submission_id: int,
    payload: schemas.StatusUpdateRequest,
    store: MemoryStore = Depends(get_store),
):
    """
    Set the review status of an artwork submission

    **Possible errors:**
    - 400: Status is not one of pending, approved, rejected
    - 404: Submission not found
    """
    service = SubmissionService(store)
    try:
        return service.update_submission_status(submission_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except Exception:
        logger.exception("Failed to update submission %s", submission_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update submission status",
        )


@admin_router.get("/nft-submissions", response_model=List[models.NftSubmission])
def list_nft_submissions(store: MemoryStore = Depends(get_store)):
    service = SubmissionService(store)
    try:
        return service.get_all_nft_submissions()
    except Exception:
        logger.exception("Failed to fetch NFT submissions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch NFT submissions",
        )


@admin_router.get(
    "/nft-submissions/{submission_id}", response_model=models.NftSubmission
)
def get_nft_submission(submission_id: int, store: MemoryStore = Depends(get_store)):
    service = SubmissionService(store)
    submission = service.get_nft_submission(submission_id)
    if not submission:
        raise HTTPException(status_code=404, detail="NFT submission not found")
    return submission


@admin_router.put(
    "/nft-submissions/{submission_id}/status", response_model=models.NftSubmission
)
def update_nft_submission_status(
    submission_id: int,
    payload: schemas.StatusUpdateRequest,
    store: MemoryStore = Depends(get_store),
):
    """
    Set the verification status of an NFT submission

    **Possible errors:**
    - 400: Status is not one of pending, approved, rejected
    - 404: NFT submission not found
    """
    service = SubmissionService(store)
    try:
        return service.update_nft_submission_status(submission_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except Exception:
        logger.exception("Failed to update NFT submission %s", submission_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update NFT submission status",
        )
