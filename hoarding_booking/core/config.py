from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BOOKING_API_BASE_URL: str | None = None
    BOOKING_API_TOKEN: str | None = None
    BOOKING_API_TIMEOUT_SECONDS: float = 10.0
    BOOKED_RANGES_CACHE_TTL_SECONDS: float = 3600.0

    LOCAL_UTC_OFFSET_MINUTES: int = 330  # IST, UTC+5:30
    LEAD_TIME_DAYS: int = 4
    MIN_BOOKING_DAYS: int = 1
    MAX_BOOKING_DAYS: int = 365

    COMMISSION_RATE: float = 0.15
    TAX_RATE: float = 0.18

    MONTH_WINDOW_INITIAL: int = 24
    MONTH_WINDOW_STEP: int = 12
    MONTH_WINDOW_MAX: int = 60
    WEEK_START: int = 6  # calendar.SUNDAY


settings = Settings()
