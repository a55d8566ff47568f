# core/config.py
from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

from core.context import Capabilities

DEFAULT_DATA_SOURCE = "data/2025.01.31_RE Supply_Max Review_For upload.xlsx"

class Settings(BaseSettings):
    # Origen del libro (ruta local o URL http/https)
    DATA_SOURCE: str = DEFAULT_DATA_SOURCE
    HTTP_TIMEOUT: float = 10.0
    # Convención de varianza: "percent" (umbral 15) | "fraction" (umbral 0.4)
    VARIANCE_CONVENTION: Literal["percent", "fraction"] = "percent"
    # Capacidades del dashboard
    SHOW_SEASON: bool = True
    SUPPLIER_FILTER: bool = True
    ENABLE_NOTES: bool = True
    COMPOSITE_KEY: bool = True
    BASELINE_MODE: Literal["fixed", "rolling"] = "fixed"
    SORTED_OPTIONS: bool = True
    # Otros
    LOG_LEVEL: str = "info"

    class Config:
        env_prefix = "MINMAX_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    def capabilities(self) -> Capabilities:
        return Capabilities(
            season=self.SHOW_SEASON,
            supplier_filter=self.SUPPLIER_FILTER,
            notes=self.ENABLE_NOTES,
            composite_key=self.COMPOSITE_KEY,
            baseline_mode=self.BASELINE_MODE,
            sorted_options=self.SORTED_OPTIONS,
            variance_convention=self.VARIANCE_CONVENTION,
        )

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
