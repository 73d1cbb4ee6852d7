"""Settings storage for the survey feature.

The survey feature reads completion flags and site details from the plugin
settings, reads the WooCommerce onboarding progress from the host options,
and writes completion flags once a survey has been submitted.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)

FEEDBACK_SURVEY_COMPLETED = "feedback_survey_completed"
WOOCOMMERCE_SURVEY_COMPLETED = "woocommerce_survey_completed"
WEBSITE_TYPE = "survey.website.type"
CONTENT_PUBLISHED = "content_published"
WOO_COMPLETED_TASKS_OPTION = "woocommerce_task_list_tracked_completed_tasks"


class SettingsStore(Protocol):
    """Interface used by the survey services to reach persisted settings."""

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Return a plugin setting."""

    def update_setting(self, key: str, value: Any) -> None:
        """Persist a plugin setting."""

    def get_option(self, key: str, default: Any = None) -> Any:
        """Return a read-only host option."""


class InMemorySettingsStore:
    """Settings store held in memory, used by tests and local runs."""

    def __init__(
        self,
        settings: Optional[dict[str, Any]] = None,
        options: Optional[dict[str, Any]] = None,
    ):
        self.settings: dict[str, Any] = dict(settings or {})
        self.options: dict[str, Any] = dict(options or {})

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def update_setting(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)


class JSONSettingsStore:
    """Settings store backed by a JSON file.

    The file holds two objects, ``settings`` and ``options``. It is read on
    every lookup and rewritten on every update, so values written by another
    process are picked up without restarting.
    """

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def _load(self) -> dict[str, dict[str, Any]]:
        if not self.file_path.exists():
            return {"settings": {}, "options": {}}

        with self.file_path.open(encoding="utf-8") as file:
            content = json.load(file)

        if not isinstance(content, dict):
            raise ValueError(f"Settings file must contain an object: {self.file_path}")

        return {
            "settings": content.get("settings") or {},
            "options": content.get("options") or {},
        }

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self._load()["settings"].get(key, default)

    def update_setting(self, key: str, value: Any) -> None:
        content = self._load()
        content["settings"][key] = value

        # The previous file stays in place until the new content is complete.
        tmp_path = self.file_path.with_name(f"{self.file_path.name}.tmp")
        with tmp_path.open("w", encoding="utf-8") as file:
            json.dump(content, file, indent=2)
        tmp_path.replace(self.file_path)
        logger.debug(f"Setting {key} updated in {self.file_path}")

    def get_option(self, key: str, default: Any = None) -> Any:
        return self._load()["options"].get(key, default)
