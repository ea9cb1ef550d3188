from flask import Flask, request, Response, jsonify
import logging
from typing import Optional
from openai import OpenAI
from supabase import create_client
from twilio.rest import Client
from twilio.twiml.voice_response import VoiceResponse

from .services.calls import CallService
from .services.journal import JournalService
from .services.storage import StorageService
from .services.summary import SummaryService
from lib.config import Settings
from lib.error_handler import AppError

logger = logging.getLogger(__name__)

GREETING = (
    "Hi, this is your AI assistant. How was your day today? "
    "Tell me about your energy, what went well, one thing you learned, "
    "and three things you are grateful for."
)
GOODBYE = "Thank you. Your reflection has been saved. Good night!"
NO_SPEECH = "No speech detected"

# Endpoints Twilio posts to; their errors are spoken back as TwiML
TWILIO_WEBHOOKS = {'voice', 'process'}


def create_twiml_response(twiml: VoiceResponse, status: int = 200) -> Response:
    """Wrap a TwiML document in an XML response"""
    return Response(str(twiml), status=status, mimetype='text/xml')


def build_services(settings: Settings):
    """Build the real OpenAI, Supabase and Twilio backed services"""
    logger.info("Initializing OpenAI client...")
    openai_client = OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout,
        max_retries=0
    )

    logger.info("Initializing Supabase client...")
    try:
        supabase = create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(f"Error initializing Supabase client: {str(e)}")
        raise

    logger.info("Initializing Twilio client...")
    twilio_client = Client(settings.twilio_account_sid, settings.twilio_auth_token)

    storage_service = StorageService(supabase, table=settings.journals_table)
    summary_service = SummaryService(openai_client, model=settings.openai_model)
    call_service = CallService(
        twilio_client,
        from_number=settings.twilio_phone_number,
        to_number=settings.user_phone_number,
        voice_url=settings.voice_url
    )
    logger.info("All services initialized successfully")
    return storage_service, summary_service, call_service


def create_app(
    settings: Settings,
    storage_service: Optional[StorageService] = None,
    summary_service: Optional[SummaryService] = None,
    call_service: Optional[CallService] = None
) -> Flask:
    if storage_service is None or summary_service is None or call_service is None:
        storage, summary, calls = build_services(settings)
        storage_service = storage_service or storage
        summary_service = summary_service or summary
        call_service = call_service or calls

    journal_service = JournalService(summary_service, storage_service)

    app = Flask(__name__)
    app.config['SETTINGS'] = settings

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        logger.error(f"Request failed: {error.message}", exc_info=error)
        if request.endpoint not in TWILIO_WEBHOOKS:
            return jsonify({'error': error.user_message}), error.status_code
        twiml = VoiceResponse()
        twiml.say(error.user_message)
        return create_twiml_response(twiml, status=error.status_code)

    @app.route('/', methods=['GET'])
    def root():
        """Basic health check"""
        return {'status': 'healthy'}

    @app.route('/voice', methods=['POST'])
    def voice():
        """Greet the caller and ask Twilio to gather their spoken reflection"""
        logger.info(f"Voice webhook received for call {request.form.get('CallSid')}")
        twiml = VoiceResponse()
        gather = twiml.gather(input='speech', action='/process', method='POST')
        gather.say(GREETING)
        return create_twiml_response(twiml)

    @app.route('/process', methods=['POST'])
    async def process():
        """Summarize and store the reflection Twilio gathered"""
        speech = request.form.get('SpeechResult') or NO_SPEECH
        logger.info(f"Processing reflection: {speech[:50]}...")

        await journal_service.record(speech)

        twiml = VoiceResponse()
        twiml.say(GOODBYE)
        return create_twiml_response(twiml)

    @app.route('/trigger-call', methods=['GET'])
    async def trigger_call():
        """Place the outbound reflection call"""
        await call_service.place_call()
        return Response('Call initiated', mimetype='text/plain')

    @app.route('/journals', methods=['GET'])
    async def journals():
        """List stored reflections, newest first"""
        return jsonify(await storage_service.list_journals())

    return app
