import logging
from typing import Any, Dict, List

from ..models import JournalEntry
from lib.error_handler import ErrorHandler, READ_FAILED

logger = logging.getLogger(__name__)


class StorageService:
    def __init__(self, supabase_client, table: str = 'journals'):
        self.supabase = supabase_client
        self.journals_table = table
        logger.info(f"Storage service initialized with table: {table}")

    async def store_journal(self, entry: JournalEntry) -> Dict[str, Any]:
        """Insert one reflection; failures are raised, never swallowed"""
        try:
            data = entry.to_record()
            logger.info(f"Storing journal in Supabase: {data}")
            result = self.supabase.table(self.journals_table).insert(data).execute()
            if hasattr(result, 'error') and result.error:
                raise Exception(f"Supabase error: {result.error}")
            return result.data[0] if result.data else data
        except Exception as e:
            raise ErrorHandler.handle_storage_error(e) from e

    async def list_journals(self) -> List[Dict[str, Any]]:
        """Return every stored reflection as stored, newest first"""
        try:
            result = self.supabase.table(self.journals_table)\
                .select('*')\
                .order('timestamp', desc=True)\
                .execute()
            if hasattr(result, 'error') and result.error:
                raise Exception(f"Supabase error: {result.error}")
        except Exception as e:
            raise ErrorHandler.handle_storage_error(e, user_message=READ_FAILED) from e

        rows = result.data or []
        logger.info(f"Fetched {len(rows)} journals")
        return rows
