from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BUSINESS_NAME: str = "AI Receptionist"
    BUSINESS_TIMEZONE: str = "UTC"

    SEAT_ROWS: str = "AB"
    SEATS_PER_ROW: int = 10

    DEFAULT_DURATION: str = "2 hours"
    DEFAULT_PURPOSE: str = "General booking"
    AVAILABILITY_PREVIEW_LIMIT: int = 10
    BOOKING_ID_PREFIX: str = "BK"


settings = Settings()
