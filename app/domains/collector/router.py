import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.domains.collector import schemas
from app.domains.collector.service import CollectorService
from app.shared.database.store import MemoryStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/collectors", tags=["collector"])


@router.get("/{wallet_address}", response_model=schemas.CollectorSummaryResponse)
def get_collector_summary(
    wallet_address: str,
    store: MemoryStore = Depends(get_store),
):
    """
    Summarize a wallet's NFT verification activity

    Never creates a user; unseen wallets get zero counts.
    """
    service = CollectorService(store)
    try:
        return service.get_summary(wallet_address)
    except Exception:
        logger.exception("Failed to build collector summary for %s", wallet_address)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch collector",
        )
