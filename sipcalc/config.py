from __future__ import annotations

from pathlib import Path
from typing import ClassVar, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    app_env: str = "dev"
    service_name: str = "sipcalc"
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"
    log_level: str = "info"

    # clamp incoming plans into the slider ranges before projecting
    clamp_inputs: bool = True
    # False keeps taxing negative gains (a rebate), as the calculator always has
    clamp_gains_at_zero: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SIPCALC_",
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    settings_cache: ClassVar[dict[str, "AppSettings"]] = {}

    @property
    def cors_allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @classmethod
    def cached_settings(cls) -> "AppSettings":
        if (cached := cls.settings_cache.get("default")) is None:
            cached = cls()
            cls.settings_cache["default"] = cached
        return cached


def get_settings() -> AppSettings:
    return AppSettings.cached_settings()
