from __future__ import annotations

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


def load_env(*, override: bool = False) -> Path | None:
    """
    Load the nearest `.env`, searching from the working directory upwards.

    Already-set variables are kept unless `override=True`.
    """

    found = find_dotenv(usecwd=True)
    if not found:
        return None
    load_dotenv(dotenv_path=found, override=override)
    logger.debug(f"Loaded environment from {found}")
    return Path(found)
