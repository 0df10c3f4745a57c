""" Initializations """

import os

from awesome_project.config import logger
from awesome_project.config.service_settings import load_service_settings

# mypy: ignore-errors
CONFIG = load_service_settings(os.path.join(os.path.dirname(__file__), "config"))

logger.apply_logging_settings(CONFIG.logging)
