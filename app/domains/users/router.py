import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.domains.users import models, schemas
from app.domains.users.service import UserService
from app.shared.database.store import MemoryStore, get_store
from app.shared.errors import UsernameTakenError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[models.User])
def list_users(
    limit: Optional[int] = Query(None, ge=1),
    store: MemoryStore = Depends(get_store),
):
    user_service = UserService(store)
    try:
        return user_service.list_users(limit=limit)
    except Exception:
        logger.exception("Failed to fetch users")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch users",
        )


@router.post("", response_model=models.User, status_code=status.HTTP_201_CREATED)
def create_user(user: schemas.UserCreate, store: MemoryStore = Depends(get_store)):
    """
    Create a user

    **Possible errors:**
    - 409: Username already registered
    """
    user_service = UserService(store)
    try:
        return user_service.create_user(user)
    except UsernameTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)


@router.get("/by-wallet/{wallet_address}", response_model=models.User)
def resolve_wallet(wallet_address: str, store: MemoryStore = Depends(get_store)):
    """
    Get the user bound to a wallet, creating it the first time the wallet is seen
    """
    user_service = UserService(store)
    try:
        return user_service.resolve_wallet(wallet_address)
    except Exception:
        logger.exception("Failed to resolve wallet %s", wallet_address)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user",
        )


@router.get("/wallets/logged-in", response_model=List[str])
def list_logged_in_wallets(store: MemoryStore = Depends(get_store)):
    user_service = UserService(store)
    return user_service.list_logged_in_wallets()


@router.get("/username/{username}", response_model=models.User)
def read_user_by_username(username: str, store: MemoryStore = Depends(get_store)):
    user_service = UserService(store)
    user = user_service.get_user_by_username(username)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}", response_model=models.User)
def read_user(user_id: int, store: MemoryStore = Depends(get_store)):
    user_service = UserService(store)
    user = user_service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
