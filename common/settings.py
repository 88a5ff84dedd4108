"""Shared board settings read from environment variables."""

import os

NUMBER_METHOD: str = os.environ.get('HEXBOARD_NUMBER_METHOD', 'spiral')
LOG_LEVEL: str = os.environ.get('HEXBOARD_LOG_LEVEL', 'INFO').upper()

_seed = os.environ.get('HEXBOARD_SEED', '')
SEED: int | None = int(_seed) if _seed else None
