# src/crest/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SORT_METRICS = ("totalROI", "cashOnCash", "capRate", "dscr", "annualizedReturn")


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Deal book
    # -----------------------------
    # Load the five example deals when the API starts
    SEED_SAMPLE_DEALS: bool = Field(default=True)

    DEFAULT_SORT_METRIC: str = Field(default="totalROI")
    EXPORT_FILENAME: str = Field(default="cre-deal-analysis.csv")

    model_config = SettingsConfigDict(
        env_prefix="CREST_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("DEFAULT_SORT_METRIC", mode="before")
    @classmethod
    def _known_metric(cls, v: Any) -> Any:
        v = str(v).strip()
        if v not in SORT_METRICS:
            raise ValueError(f"DEFAULT_SORT_METRIC must be one of {', '.join(SORT_METRICS)}")
        return v


config = AppConfig()
