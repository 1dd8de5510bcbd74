from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./detailing.db"

    log_level: str = "INFO"

    # Auth settings
    session_max_age: int = 86400 * 7  # 7 days
    min_username_length: int = 3
    min_password_length: int = 6

    # Rate limiting (fixed window, per client IP)
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window: int = 60  # seconds
    rate_limit_trust_forwarded: bool = False  # Honour X-Forwarded-For behind a proxy

    class Config:
        env_file = ".env"


settings = Settings()
