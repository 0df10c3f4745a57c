"""
YAML-backed settings for awesome-project.

``YamlServiceSettings`` adds the YAML files of a settings directory as a pydantic-settings source. Environment
variables still override them, nested values with a double underscore, e.g. ``MAIN__APP_NAME=demo``.
"""

import logging
import os
from typing import Any, Type

import yaml
from pydantic.fields import FieldInfo
from pydantic_settings import (BaseSettings, InitSettingsSource,
                               PydanticBaseSettingsSource, SettingsConfigDict)

logger = logging.getLogger(__name__)


def merge_settings(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Merge two settings documents, nested sections key by key; ``override`` wins on conflicts.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_settings(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_yaml_settings(settings_file_names: list[str], settings_dirname: str) -> dict[str, Any]:
    """
    Read and merge the YAML files in order. Missing files are skipped with a warning.

    :raises FileNotFoundError: if none of the files exist
    """
    values: dict[str, Any] = {}
    found = False
    for fname in settings_file_names:
        path = os.path.join(settings_dirname, fname)
        if not os.path.exists(path):
            logger.warning('YAML settings file "%s" not found in %s, skipping.', fname, settings_dirname)
            continue
        with open(path, encoding="utf-8") as file:
            values = merge_settings(values, yaml.safe_load(file) or {})
        found = True

    if not found:
        raise FileNotFoundError(
            f"None of the YAML settings files {settings_file_names} exist in {settings_dirname}."
        )
    return values


class YamlServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_nested_delimiter="__", extra="allow")

    def __init__(
        self, settings_file_names: str | list[str], settings_dirname: str, **values: Any
    ):
        if isinstance(settings_file_names, str):
            settings_file_names = [settings_file_names]

        super().__init__(
            _yaml_values=load_yaml_settings(settings_file_names, settings_dirname),
            **values
        )

    # pylint: disable=too-many-arguments
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: InitSettingsSource,  # type: ignore # always an InitSettingsSource here
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        yaml_settings = _ValuesSource(settings_cls, init_settings.init_kwargs.pop("_yaml_values"))

        # first source wins: environment, then YAML, then explicit kwargs
        return env_settings, yaml_settings, init_settings, file_secret_settings


class _ValuesSource(PydanticBaseSettingsSource):
    def __init__(self, settings_cls: type[BaseSettings], values: dict[str, Any]):
        super().__init__(settings_cls)
        self._values = values

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        # unused: __call__ hands over the whole document
        raise NotImplementedError()

    def __call__(self) -> dict[str, Any]:
        return self._values
