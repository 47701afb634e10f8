"""Runtime configuration read from the environment."""

import logging
import os
from pathlib import Path
from typing import Optional

# Directory of YAML spec definitions; empty means the packaged definitions
DEFINITIONS_DIR = os.environ.get("PARAMETERIZER_DEFINITIONS_DIR", "")

LOG_LEVEL = os.environ.get("PARAMETERIZER_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PACKAGED_DEFINITIONS_DIR = Path(__file__).parent / "specs" / "definitions"


def get_definitions_dir() -> Path:
    """Directory the global spec registry loads definitions from."""
    if DEFINITIONS_DIR:
        return Path(DEFINITIONS_DIR)
    return PACKAGED_DEFINITIONS_DIR


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the organizer."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
