from typing import Optional
import logging

logger = logging.getLogger(__name__)

SUMMARY_ERROR = "Error summarizing"
SAVE_FAILED = "Sorry, your reflection could not be saved. Please call again later."
READ_FAILED = "Journals could not be loaded. Please try again later."


class AppError(Exception):
    def __init__(self, message: str, status_code: int = 500, user_message: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.user_message = user_message or "Sorry, something went wrong. Please try again later."
        super().__init__(self.message)


class ErrorHandler:
    @staticmethod
    def handle_summary_error(error: Exception) -> str:
        logger.error(f"OpenAI error: {str(error)}")
        return SUMMARY_ERROR

    @staticmethod
    def handle_storage_error(error: Exception, user_message: str = SAVE_FAILED) -> AppError:
        logger.error(f"Storage error: {str(error)}")
        return AppError(
            f"Journal storage error: {str(error)}",
            status_code=500,
            user_message=user_message
        )

    @staticmethod
    def handle_call_error(error: Exception, code: Optional[int] = None) -> None:
        if code is not None:
            logger.error(f"Call failed with Twilio error {code}: {str(error)}")
        else:
            logger.error(f"Call failed: {str(error)}")
