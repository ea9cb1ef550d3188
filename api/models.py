from datetime import datetime, timezone
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Energy = Literal['low', 'medium', 'high', 'unknown']

MAX_GRATITUDE = 3


class JournalEntry(BaseModel):
    """One spoken reflection as it is stored and served by /journals.

    Column names follow the JSON the endpoint returns, so ``raw_text`` is
    written and read as ``rawText``.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[Union[int, str]] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    raw_text: str = Field(alias='rawText')
    summary: str
    energy: Energy = 'unknown'
    gratitude: List[str] = Field(default_factory=list, max_length=MAX_GRATITUDE)

    def to_record(self) -> dict:
        """Row for the store; ``id`` is left to the database."""
        return self.model_dump(mode='json', by_alias=True, exclude={'id'})
