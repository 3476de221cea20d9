"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ExtractConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    interval_minutes: int = Field(default=15, ge=1)
    output_folder_path: str = "~/avr/PowerTradeReports"
    time_zone: str = "Europe/Madrid"

    @property
    def output_folder(self) -> Path:
        return Path(self.output_folder_path).expanduser()


class RetryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=3, ge=1)
    delay_s: float = Field(default=5.0, ge=0)


class SourceConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["random", "http"] = "random"
    base_url: str = "http://localhost:8080"
    timeout_s: float = 15.0
    # Random source only
    failure_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    max_trades: int = Field(default=5, ge=1)
    seed: int | None = None


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    format: str = "json"
    file_path: str | None = None


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    extract: ExtractConfig = Field(default_factory=ExtractConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
