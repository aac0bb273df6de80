from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "exercise-naming"
    ENV: str = "dev"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Name rules ─────────────────────

    MIN_NAME_LENGTH: int = 3
    MAX_NAME_LENGTH: int = 50

    # ──────────────────── API ─────────────────────

    # Upper bound on names accepted by a single batch request
    MAX_BATCH_SIZE: int = 200


settings = Settings()
