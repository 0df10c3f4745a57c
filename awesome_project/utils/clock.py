"""
Timestamp provider.
"""

import datetime
import logging

from awesome_project import CONFIG

logger = logging.getLogger(__name__)


def _current_time() -> datetime.datetime:
    return datetime.datetime.now()


def now() -> str:
    """
    Current local time as display text, formatted with ``main.clock.timestamp_format``.

    :return: formatted timestamp
    :rtype: str
    """
    timestamp_format = CONFIG.main.clock.timestamp_format
    logger.debug('Formatting current time with "%s"', timestamp_format)

    return _current_time().strftime(timestamp_format)
