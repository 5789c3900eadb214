from functools import lru_cache
from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

class Settings:
    # Messenger Platform settings
    VERIFY_TOKEN: str = os.getenv("MESSENGER_VERIFY_TOKEN", "verify_token")
    PAGE_ACCESS_TOKEN: str = os.getenv("MESSENGER_PAGE_TOKEN", "")
    GRAPH_API_VERSION: str = os.getenv("MESSENGER_VERSION", "v2.6")
    MESSENGER_POST_URL: str = os.getenv(
        "MESSENGER_POST_URL",
        f"https://graph.facebook.com/{GRAPH_API_VERSION}/me/messages"
    )

    # Destinatario fijo para las notificaciones de git
    GIT_NOTIFY_RECIPIENT_ID: str = os.getenv("GIT_NOTIFY_RECIPIENT_ID", "1137104706416635")

    # APIs de enriquecimiento
    WEATHER_API_KEY: str = os.getenv("WEATHER_API_KEY", "")
    WEATHER_ENDPOINT: str = os.getenv("WEATHER_ENDPOINT", "https://api.openweathermap.org/data/2.5/weather")
    IMAGE_API_KEY: str = os.getenv("IMAGE_API_KEY", "")
    IMAGE_ENDPOINT: str = os.getenv("IMAGE_ENDPOINT", "https://pixabay.com/api/")

    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "America/Bogota")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG")

@lru_cache
def get_settings() -> Settings:
    return Settings()
