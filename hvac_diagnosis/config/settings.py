"""Configuration settings for the refrigerant-cycle diagnostic engine."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Diagnostic Configuration
    DEFAULT_REFRIGERANT: str = "R-22"
    DEFAULT_FACILITY_TYPE: str = "냉장 (0°C)"
    DEFAULT_AMBIENT_TEMP: float = 30.0

    # 알 수 없는 냉매/표 범위 밖 입력을 오류로 처리할지 여부
    STRICT_MODE: bool = False

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "TEXT"  # TEXT / JSON

    # Report Configuration
    REPORT_FONT_PATH: Optional[str] = None
    REPORT_TITLE: str = "HVAC 진단 리포트"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()

APP_CONFIG = {
    'default_refrigerant': settings.DEFAULT_REFRIGERANT,
    'default_facility_type': settings.DEFAULT_FACILITY_TYPE,
    'default_ambient_temp': settings.DEFAULT_AMBIENT_TEMP,
    'strict_mode': settings.STRICT_MODE,
    'log_level': settings.LOG_LEVEL,
    'log_format': settings.LOG_FORMAT,
}

REPORT_CONFIG = {
    'title': settings.REPORT_TITLE,
    'font_path': settings.REPORT_FONT_PATH,
}
