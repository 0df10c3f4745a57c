import logging
import os

import pytest

from awesome_project.config.logger import FormatterType, LogLevel
from awesome_project.config.base_settings import merge_settings
from awesome_project.config.service_settings import (ServiceSettings,
                                                     load_service_settings)

BASE_YAML = """
logging:
  formatter: json
  root_log_level: WARNING
main:
  app_name: from-yaml
"""

OVERRIDE_YAML = """
main:
  clock:
    timestamp_format: "%Y"
"""


@pytest.fixture
def settings_dir(tmp_path):
    (tmp_path / "base.yaml").write_text(BASE_YAML, encoding="utf-8")
    (tmp_path / "override.yaml").write_text(OVERRIDE_YAML, encoding="utf-8")
    return tmp_path


def test_load_single_file(settings_dir):
    settings = ServiceSettings("base.yaml", str(settings_dir))

    assert settings.main.app_name == "from-yaml"
    assert settings.main.clock.timestamp_format == "%Y-%m-%d %H:%M:%S"
    assert settings.logging.formatter == FormatterType.JSON
    assert settings.logging.root_log_level == LogLevel.WARNING


def test_later_files_take_precedence(settings_dir):
    settings = ServiceSettings(["base.yaml", "override.yaml"], str(settings_dir))

    assert settings.main.app_name == "from-yaml"
    assert settings.main.clock.timestamp_format == "%Y"


def test_environment_overrides_yaml(settings_dir, monkeypatch):
    monkeypatch.setenv("MAIN__APP_NAME", "from-env")

    settings = ServiceSettings("base.yaml", str(settings_dir))

    assert settings.main.app_name == "from-env"


def test_missing_file_is_skipped(settings_dir, caplog):
    with caplog.at_level(logging.WARNING):
        settings = ServiceSettings(["base.yaml", "absent.yaml"], str(settings_dir))

    assert settings.main.app_name == "from-yaml"
    assert "absent.yaml" in caplog.text


def test_no_file_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        ServiceSettings(["absent.yaml"], str(tmp_path))


def test_merge_settings_keeps_sibling_keys():
    base = {"main": {"app_name": "base", "clock": {"timestamp_format": "%Y"}}, "logging": {"formatter": "json"}}
    override = {"main": {"clock": {"timestamp_format": "%d"}}}

    result = merge_settings(base, override)

    assert result == {
        "main": {"app_name": "base", "clock": {"timestamp_format": "%d"}},
        "logging": {"formatter": "json"},
    }
    assert base["main"]["clock"]["timestamp_format"] == "%Y"


def test_dotenv_overrides_yaml(tmp_path):
    # given
    (tmp_path / "settings.yaml").write_text(BASE_YAML, encoding="utf-8")
    (tmp_path / ".env").write_text("MAIN__CLOCK__TIMESTAMP_FORMAT=%H:%M\n", encoding="utf-8")

    # when
    try:
        settings = load_service_settings(str(tmp_path))
    finally:
        os.environ.pop("MAIN__CLOCK__TIMESTAMP_FORMAT", None)

    # then
    assert settings.main.app_name == "from-yaml"
    assert settings.main.clock.timestamp_format == "%H:%M"


def test_load_without_dotenv(tmp_path):
    (tmp_path / "settings.yaml").write_text(BASE_YAML, encoding="utf-8")

    settings = load_service_settings(str(tmp_path))

    assert settings.main.app_name == "from-yaml"
