from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    # Supabase settings
    supabase_url: str = ''
    supabase_key: str = ''
    journals_table: str = 'journals'

    # OpenAI settings
    openai_api_key: str = ''
    openai_model: str = 'gpt-4'
    openai_timeout: float = 30.0

    # Twilio settings
    twilio_account_sid: str = ''
    twilio_auth_token: str = ''
    twilio_phone_number: str = ''
    user_phone_number: str = ''

    # Public URL Twilio calls back into, e.g. an ngrok tunnel
    base_url: str = ''
    port: int = 3000

    @property
    def voice_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/voice"


def get_settings() -> Settings:
    return Settings()
