"""Unit tests for the settings stores."""

import json
from unittest.mock import patch

import pytest

from utils.settings_utils import (
    FEEDBACK_SURVEY_COMPLETED,
    WOO_COMPLETED_TASKS_OPTION,
    InMemorySettingsStore,
    JSONSettingsStore,
)


@pytest.mark.utils
def test_in_memory_store():
    """Settings and options are read back; options are separate from settings."""
    store = InMemorySettingsStore(options={WOO_COMPLETED_TASKS_OPTION: ["products"]})

    assert store.get_setting(FEEDBACK_SURVEY_COMPLETED) is None
    assert store.get_setting(FEEDBACK_SURVEY_COMPLETED, False) is False
    store.update_setting(FEEDBACK_SURVEY_COMPLETED, True)
    assert store.get_setting(FEEDBACK_SURVEY_COMPLETED) is True
    assert store.get_option(WOO_COMPLETED_TASKS_OPTION) == ["products"]
    assert store.get_option(FEEDBACK_SURVEY_COMPLETED) is None


@pytest.mark.utils
def test_json_store_missing_file(tmp_path):
    """A missing file reads as empty."""
    store = JSONSettingsStore(tmp_path / "settings.json")

    assert store.get_setting(FEEDBACK_SURVEY_COMPLETED) is None
    assert store.get_option(WOO_COMPLETED_TASKS_OPTION, []) == []


@pytest.mark.utils
def test_json_store_update_persists(tmp_path):
    """Updates are written to disk and keep the host options."""
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"options": {WOO_COMPLETED_TASKS_OPTION: ["payments"]}}),
        encoding="utf-8",
    )

    JSONSettingsStore(path).update_setting(FEEDBACK_SURVEY_COMPLETED, True)

    reopened = JSONSettingsStore(path)
    assert reopened.get_setting(FEEDBACK_SURVEY_COMPLETED) is True
    assert reopened.get_option(WOO_COMPLETED_TASKS_OPTION) == ["payments"]
    assert json.loads(path.read_text(encoding="utf-8"))["settings"] == {
        FEEDBACK_SURVEY_COMPLETED: True
    }
    assert not path.with_name("settings.json.tmp").exists()


@pytest.mark.utils
def test_json_store_rejects_non_object(tmp_path):
    """A settings file that is not an object is an error."""
    path = tmp_path / "settings.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        JSONSettingsStore(path).get_setting(FEEDBACK_SURVEY_COMPLETED)


@pytest.mark.utils
def test_json_store_failed_write_keeps_file(tmp_path):
    """A write that fails part way leaves the previous settings in place."""
    path = tmp_path / "settings.json"
    original = {
        "settings": {FEEDBACK_SURVEY_COMPLETED: False},
        "options": {WOO_COMPLETED_TASKS_OPTION: ["products"]},
    }
    path.write_text(json.dumps(original), encoding="utf-8")

    with patch("utils.settings_utils.json.dump", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            JSONSettingsStore(path).update_setting(FEEDBACK_SURVEY_COMPLETED, True)

    assert json.loads(path.read_text(encoding="utf-8")) == original
    reopened = JSONSettingsStore(path)
    assert reopened.get_option(WOO_COMPLETED_TASKS_OPTION) == ["products"]
