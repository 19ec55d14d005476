"""
Configuration settings for the Kisan Sahayak backend
"""
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Configuration
    app_name: str = Field(default="Kisan Sahayak", env="APP_NAME")
    app_version: str = Field(default="1.0.0", env="APP_VERSION")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # API Configuration
    api_prefix: str = Field(default="/api", env="API_PREFIX")
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        env="CORS_ORIGINS"
    )

    # Localization
    supported_languages: str = Field(default="en,hi", env="SUPPORTED_LANGUAGES")
    default_language: str = Field(default="en", env="DEFAULT_LANGUAGE")

    # Rule sources (bundled defaults are used when unset)
    chat_rules_file: Optional[str] = Field(default=None, env="CHAT_RULES_FILE")
    suggestion_rules_file: Optional[str] = Field(default=None, env="SUGGESTION_RULES_FILE")
    scheme_rules_file: Optional[str] = Field(default=None, env="SCHEME_RULES_FILE")

    # Eligibility scoring
    scoring_base_score: int = Field(default=50, env="SCORING_BASE_SCORE")
    scoring_high_priority_bonus: int = Field(default=10, env="SCORING_HIGH_PRIORITY_BONUS")

    # Weather
    weather_default_location: str = Field(default="Delhi", env="WEATHER_DEFAULT_LOCATION")
    weather_max_forecast_days: int = Field(default=14, env="WEATHER_MAX_FORECAST_DAYS")
    weather_cache_minutes: int = Field(default=30, env="WEATHER_CACHE_MINUTES")
    weather_seed: Optional[int] = Field(default=None, env="WEATHER_SEED")

    def get_supported_languages_list(self) -> List[str]:
        """Get supported language codes as a list"""
        return [lang.strip() for lang in self.supported_languages.split(',') if lang.strip()]

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()

# Validate required settings
if settings.default_language not in settings.get_supported_languages_list():
    raise ValueError(
        "DEFAULT_LANGUAGE must be one of SUPPORTED_LANGUAGES"
    )
