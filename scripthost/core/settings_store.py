from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from platformdirs import user_config_path
from pydantic import ValidationError

from scripthost.core.config import APP_AUTHOR, APP_NAME, SETTINGS_FILENAME
from scripthost.core.settings_model import SettingsModel


def default_settings_path() -> Path:
    return Path(user_config_path(APP_NAME, APP_AUTHOR)) / SETTINGS_FILENAME


class SettingsStore:
    """Load and persist scripthost user settings."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        """Read settings from disk, injecting expected sections."""
        if self._path.exists():
            try:
                raw = json.loads(self._path.read_text())
            except (OSError, json.JSONDecodeError):
                raw = {}
        else:
            return self._normalize({})
        migrated = self._migrate(raw)
        normalized = self._normalize(migrated)
        if self._should_persist_upgrade(raw, normalized):
            self._backup_raw_settings()
            self.save(normalized)
        return normalized

    def save(self, settings: dict[str, Any]) -> None:
        """Persist settings to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(settings, indent=4))

    def _normalize(self, data: dict[str, Any]) -> dict[str, Any]:
        try:
            model = SettingsModel.model_validate(data or {})
        except ValidationError:
            model = SettingsModel()
        return model.model_dump()

    def _migrate(self, data: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(data, dict):
            return {}
        version = data.get("schemaVersion")
        if not isinstance(version, int):
            version = 0
        if version < 1:
            data = dict(data)
            data["schemaVersion"] = 1
        return data

    def _should_persist_upgrade(
        self, raw: dict[str, Any], normalized: dict[str, Any]
    ) -> bool:
        if not isinstance(raw, dict):
            return True
        if raw.get("schemaVersion") != normalized.get("schemaVersion"):
            return True
        return raw != normalized

    def _backup_raw_settings(self) -> None:
        if not self._path.exists():
            return
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
        backup_path = self._path.with_name(f"{self._path.stem}.bak-{timestamp}.json")
        try:
            backup_path.write_text(self._path.read_text())
        except OSError:
            pass


def resolve_script_path_spec(
    option_value: str | None,
    runtime_value: str,
    settings: dict[str, Any],
) -> str:
    """Pick the extra search path spec: CLI option, then environment, then settings."""
    if option_value:
        return option_value
    if runtime_value:
        return runtime_value
    return str(settings.get("scriptPath") or "")
