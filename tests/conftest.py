import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock
import sys
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
sys.path.append(project_root)

from api.routes import create_app
from api.services.calls import CallService
from api.services.storage import StorageService
from api.services.summary import SummaryService
from lib.config import Settings

TEST_PHONE = "+15551111111"
TWILIO_PHONE = "+15550000000"
BASE_URL = "https://reflect.example.ngrok.app"


class FakeSupabaseTable:
    """Just enough of the Supabase query builder for insert/select/order"""

    def __init__(self, rows):
        self.rows = rows
        self._pending = None
        self._order = None

    def insert(self, data):
        self._pending = dict(data)
        return self

    def select(self, columns='*'):
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def execute(self):
        if self._pending is not None:
            row = {'id': len(self.rows) + 1, **self._pending}
            self.rows.append(row)
            self._pending = None
            return SimpleNamespace(data=[row])

        rows = list(self.rows)
        if self._order:
            column, desc = self._order
            rows.sort(key=lambda row: row[column], reverse=desc)
        return SimpleNamespace(data=rows)


class FakeSupabase:
    def __init__(self):
        self.tables = {}

    def table(self, name):
        return FakeSupabaseTable(self.tables.setdefault(name, []))


def make_completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://test.supabase.co",
        supabase_key="test-key",
        openai_api_key="sk-test",
        twilio_account_sid="ACtest",
        twilio_auth_token="test-token",
        twilio_phone_number=TWILIO_PHONE,
        user_phone_number=TEST_PHONE,
        base_url=BASE_URL
    )


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion(
        "The user had a calm day. Energy level: medium. "
        "They are grateful for: tea, a long walk and an early night."
    )
    return client


@pytest.fixture
def twilio_client():
    client = MagicMock()
    client.calls.create.return_value = MagicMock(sid="CA1234567890")
    return client


@pytest.fixture
def storage_service(supabase):
    return StorageService(supabase, table='journals')


@pytest.fixture
def summary_service(openai_client):
    return SummaryService(openai_client, model='gpt-4')


@pytest.fixture
def call_service(twilio_client, settings):
    return CallService(
        twilio_client,
        from_number=settings.twilio_phone_number,
        to_number=settings.user_phone_number,
        voice_url=settings.voice_url
    )


@pytest.fixture
def app(settings, storage_service, summary_service, call_service):
    app = create_app(
        settings,
        storage_service=storage_service,
        summary_service=summary_service,
        call_service=call_service
    )
    app.config['TESTING'] = True
    return app


@pytest.fixture
def test_client(app):
    return app.test_client()


@pytest.fixture
def stored_journals(supabase):
    return supabase.tables.setdefault('journals', [])
