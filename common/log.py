"""Shared logging utilities for hexboard."""

import logging

import common.settings

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level: str | None = None) -> None:
    """Configure root logging and set the level of the hexboard logger tree.

    The level defaults to the HEXBOARD_LOG_LEVEL setting.

    Raises:
        ValueError: if the level name is unknown.  Nothing is configured.
    """
    name = (level or common.settings.LOG_LEVEL).upper()
    resolved = logging.getLevelNamesMapping().get(name)
    if resolved is None:
        raise ValueError(f'Unknown log level: {name!r}')
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger('hexboard').setLevel(resolved)
