from typing import Optional

from pydantic import Field

from app.shared.utils.schema import Record


class User(Record):
    username: str = Field(..., min_length=1)
    wallet_address: Optional[str] = None
