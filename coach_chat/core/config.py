from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ASSISTANT_API_BASE_URL: str = "https://chatbot-c23f.vercel.app"
    ASSISTANT_CHAT_PATH: str = "/api/chat"
    ASSISTANT_BOOKING_PATH: str = "/api/book-meeting"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    USE_MOCK_BACKEND: bool = False

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
