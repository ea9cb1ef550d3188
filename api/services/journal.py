import logging
from datetime import datetime, timezone

from ..extraction import extract_signals
from ..models import JournalEntry
from .storage import StorageService
from .summary import SummaryService

logger = logging.getLogger(__name__)


class JournalService:
    def __init__(self, summary_service: SummaryService, storage_service: StorageService):
        self.summary = summary_service
        self.storage = storage_service

    async def record(self, speech: str) -> JournalEntry:
        """Summarize a transcript, extract its signals and persist the entry.

        Summarization never fails here (it degrades to the error sentinel);
        storage errors propagate to the caller.
        """
        timestamp = datetime.now(timezone.utc)

        summary = await self.summary.summarize(speech)
        signals = extract_signals(summary)
        logger.info(f"Extracted energy={signals.energy} gratitude={signals.gratitude}")

        entry = JournalEntry(
            timestamp=timestamp,
            raw_text=speech,
            summary=summary,
            energy=signals.energy,
            gratitude=signals.gratitude
        )
        await self.storage.store_journal(entry)
        logger.info("Journal stored")
        return entry
