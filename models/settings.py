"""Key-value preferences kept outside the expenses database."""
import json
from pathlib import Path
from typing import Any

import structlog

from utils.constants import THEME_MODES
from .errors import StorageError

log = structlog.get_logger(__name__)

MONTHLY_BUDGET_KEY = "monthly_budget"
THEME_MODE_KEY = "theme_mode"
FIRST_LAUNCH_KEY = "is_first_launch"

DEFAULT_THEME_MODE = "system"


class Preferences:
    """Small JSON document holding the monthly budget, theme and launch flag."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.warning("preferences_unreadable", path=str(self.path), error=str(e))
            return {}
        except OSError as e:
            raise StorageError(f"Could not read preferences: {e}") from e
        return data if isinstance(data, dict) else {}

    def _set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
        except OSError as e:
            log.error("storage_error", operation="save_preferences", path=str(self.path), error=str(e))
            raise StorageError(f"Could not save preferences: {e}") from e
        log.info("preference_saved", key=key)

    def get_monthly_budget(self) -> float:
        """Saved monthly budget, 0.0 when none has been set."""
        value = self._load().get(MONTHLY_BUDGET_KEY, 0.0)
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0

    def set_monthly_budget(self, amount: float) -> None:
        self._set(MONTHLY_BUDGET_KEY, float(amount))

    def has_budget(self) -> bool:
        return self.get_monthly_budget() > 0

    def clear_budget(self) -> None:
        self.set_monthly_budget(0.0)

    def get_theme_mode(self) -> str:
        mode = self._load().get(THEME_MODE_KEY, DEFAULT_THEME_MODE)
        return mode if mode in THEME_MODES else DEFAULT_THEME_MODE

    def set_theme_mode(self, mode: str) -> None:
        if mode not in THEME_MODES:
            raise ValueError(f"Unknown theme mode: {mode!r}")
        self._set(THEME_MODE_KEY, mode)

    def is_first_launch(self) -> bool:
        return bool(self._load().get(FIRST_LAUNCH_KEY, True))

    def mark_launched(self) -> None:
        self._set(FIRST_LAUNCH_KEY, False)

    def reset_first_launch(self) -> None:
        self._set(FIRST_LAUNCH_KEY, True)
