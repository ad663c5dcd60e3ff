import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    max_plan_days: int = Field(30, ge=1, alias="NEXUS_MAX_PLAN_DAYS")
    streak_lookback_days: int = Field(365, ge=1, alias="NEXUS_STREAK_LOOKBACK_DAYS")
    random_seed: Optional[int] = Field(None, alias="NEXUS_RANDOM_SEED")
    debug_endpoints: bool = Field(False, alias="NEXUS_DEBUG_ENDPOINTS")
    host: str = Field("127.0.0.1", alias="NEXUS_HOST")
    port: int = Field(8000, ge=1, le=65535, alias="NEXUS_PORT")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid planner configuration: {exc}") from exc
