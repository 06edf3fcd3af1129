from typing import Optional

from pydantic import Field

from app.shared.utils.schema import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    wallet_address: Optional[str] = Field(default=None, min_length=1)
