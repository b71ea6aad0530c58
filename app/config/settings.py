from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # Storage
    data_dir: str = "./data"
    atomic_writes: bool = False  # write to a temp file then rename; off keeps plain overwrite

    # Auth
    secret_key: str = "change-me"
    access_token_expire_minutes: int = 60 * 24 * 7
    jwt_issuer: str = "community-api"
    jwt_audience: str = "community-fe"

    # Peer matching defaults
    match_default_min_age: int = 18
    match_default_max_age: int = 99
    match_default_distance_km: float = 10.0

    # Feature defaults
    caregiver_nearby_radius_km: float = 5.0
    study_group_default_max_members: int = 10
    chatbot_max_events: int = 5

    # App
    app_name: str = "community-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    auth_rate_limit: str = "20/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
