from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Scoring
    # Year the renovation bonus is measured against. Pinned rather than read
    # from the clock so identical listings always score identically.
    reference_year: int = 2025
    score_scale: int = 10  # 10 or 100 (display only)

    # Terminal client
    api_url: str = "http://localhost:8000"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
