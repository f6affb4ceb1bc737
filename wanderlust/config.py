import warnings
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "listings.json"


class Settings(BaseSettings):
    MONGODB_URI: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "wanderlust"
    LISTINGS_COLLECTION: str = "listings"
    SEED_OWNER_ID: Optional[str] = None
    SEED_FILE: Path = DEFAULT_SEED_FILE
    MONGODB_TIMEOUT_MS: int = 5000
    API_KEY: str = "changeme"
    DOCS_ENABLED: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

if settings.API_KEY == "changeme":
    warnings.warn(
        "API_KEY is set to the default value 'changeme'. "
        "Set a strong API_KEY in your .env file before exposing the admin API.",
        stacklevel=1,
    )
