"""Reading whole text files."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def load_text_file(path: "str | os.PathLike[str]") -> str:
    """Return the whole content of a text file, line endings untouched."""
    logger.debug("Loading File: '%s'", path)
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            return stream.read()
    except OSError:
        logger.error("Failed to load '%s'", path)
        raise