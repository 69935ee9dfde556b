"""Configuration management"""
from pathlib import Path
from typing import Optional
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Report output
    output_dir: Optional[Path] = None
    report_footer: str = "ERP MR-Lana"
    default_subtitle: str = "Exportación con filtros actuales"
    # PDF pages are A4, landscape unless disabled
    pdf_landscape: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode='after')
    def setup_paths(self):
        if self.output_dir is None:
            self.output_dir = Path("outputs")
        return self

# Instantiate settings
settings = Settings()
