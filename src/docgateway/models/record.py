from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

HEX_ID_PATTERN = r"^[0-9a-fA-F]{24}$"


class Record(BaseModel):
    """External representation of one stored document.

    On input `id` is optional and never trusted: create and update drop it
    before talking to the store, whatever it contains.
    """
    model_config = ConfigDict(strict=True, extra="ignore")

    id: Optional[str] = None
    name: str
    description: str
    price: float


class StoredRecord(Record):
    """Record read back from the store; `id` is the hex form of its ObjectId"""
    id: str = Field(pattern=HEX_ID_PATTERN)
