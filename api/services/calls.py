import asyncio
import logging
from typing import Optional

from twilio.base.exceptions import TwilioRestException

from lib.error_handler import ErrorHandler

logger = logging.getLogger(__name__)


class CallService:
    def __init__(self, twilio_client, from_number: str, to_number: str, voice_url: str):
        self.client = twilio_client
        self.from_number = from_number
        self.to_number = to_number
        self.voice_url = voice_url
        logger.info(f"Call service initialized with phone number: {from_number}")

    async def place_call(self) -> Optional[str]:
        """Ask Twilio to ring the user; returns the call SID or None on failure"""
        try:
            logger.info(f"Calling {self.to_number} with webhook {self.voice_url}")
            # Run Twilio API call in an executor to prevent blocking
            loop = asyncio.get_running_loop()
            call = await loop.run_in_executor(
                None,
                lambda: self.client.calls.create(
                    url=self.voice_url,
                    to=self.to_number,
                    from_=self.from_number
                )
            )
            logger.info(f"Call initiated: {call.sid}")
            return call.sid
        except TwilioRestException as e:
            ErrorHandler.handle_call_error(e, code=e.code)
        except Exception as e:
            ErrorHandler.handle_call_error(e)
        return None
