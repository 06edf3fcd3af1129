import logging
from typing import List, Optional

from app.domains.users import models, schemas
from app.shared.database.store import MemoryStore
from app.shared.errors import UsernameTakenError

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: MemoryStore):
        self.store = store

    def create_user(self, user: schemas.UserCreate) -> models.User:
        # Check and insert under one lock so two callers can't claim a name
        with self.store.users.lock:
            if self.store.get_user_by_username(user.username) is not None:
                raise UsernameTakenError(user.username)
            return self.store.create_user(user)

    def get_user(self, user_id: int) -> Optional[models.User]:
        return self.store.get_user(user_id)

    def get_user_by_username(self, username: str) -> Optional[models.User]:
        return self.store.get_user_by_username(username)

    def list_users(self, limit: Optional[int] = None) -> List[models.User]:
        return self.store.get_users(limit)

    def resolve_wallet(self, wallet_address: str) -> models.User:
        """Return the user bound to a wallet, creating one on first sight."""
        user = self.store.get_or_create_user_by_wallet(wallet_address)
        self.store.log_wallet_login(wallet_address)
        logger.info("Wallet %s resolved to user %s", wallet_address, user.id)
        return user

    def list_logged_in_wallets(self) -> List[str]:
        return self.store.get_logged_in_wallets()
