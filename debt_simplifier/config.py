from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from debt_simplifier.services.paths import CycleDetection


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    cycle_detection: CycleDetection = Field(CycleDetection.EXACT, alias="CYCLE_DETECTION")
    reduce_max_sweeps: Optional[int] = Field(None, alias="REDUCE_MAX_SWEEPS", ge=1)


settings = Settings()
