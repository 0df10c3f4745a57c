import os

from dotenv import load_dotenv
from pydantic import BaseModel

from awesome_project.config.base_settings import YamlServiceSettings
from awesome_project.config.logger import LoggingSettings


class ClockSettings(BaseModel):
    # strftime pattern of the timestamp shown by the program
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"


class AppSettings(BaseModel):
    app_name: str
    clock: ClockSettings = ClockSettings()


class ServiceSettings(YamlServiceSettings):
    logging: LoggingSettings
    main: AppSettings


def load_service_settings(config_dirname: str) -> ServiceSettings:
    """
    Load ``.env`` (when present) into the environment, then the settings from ``settings.yaml``.

    Variables already set in the environment are not overridden by ``.env``.
    """
    load_dotenv(os.path.join(config_dirname, ".env"))

    return ServiceSettings("settings.yaml", config_dirname)
