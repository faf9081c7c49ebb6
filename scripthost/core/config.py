from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "scripthost"
APP_AUTHOR = "scripthost"
SETTINGS_FILENAME = "settings.json"


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCRIPTHOST_", case_sensitive=False)

    log_level: str = "info"
    log_format: str = "json"
    log_dir: Path | None = None
    script_path: str = ""
    output_format: str = "pretty"


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
