import asyncio
import sys
from dotenv import load_dotenv
from twilio.rest import Client

from api.services.calls import CallService
from lib.config import get_settings


def trigger_call() -> int:
    """Place the reflection call once, e.g. from a nightly cron job"""
    load_dotenv()
    settings = get_settings()
    if not settings.base_url:
        print("BASE_URL is not set; Twilio would have no webhook to call back.")
        return 1

    call_service = CallService(
        Client(settings.twilio_account_sid, settings.twilio_auth_token),
        from_number=settings.twilio_phone_number,
        to_number=settings.user_phone_number,
        voice_url=settings.voice_url
    )
    sid = asyncio.run(call_service.place_call())
    if sid is None:
        print("Call failed, see the log for details.")
        return 1

    print(f"Call initiated: {sid}")
    return 0


if __name__ == "__main__":
    sys.exit(trigger_call())
