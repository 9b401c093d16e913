#
# Imports
#

# Standard library
import os
import sys

# Environment variables
from dotenv import load_dotenv
load_dotenv()

# Logging
import logging
logger = logging.getLogger(__name__)


#
# Constants
#

# Package version reported by --version
VERSION = "0.1.0"

# Name of the logger every keycheck module logs under
PACKAGE_LOGGER = "keycheck"

# Logging level used when --verbose is not given
LOG_LEVEL = os.getenv("KEYCHECK_LOG_LEVEL", "WARNING")

# Format for log lines written to stderr
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


#
# Helper Functions
#


def resolve_log_level(verbose: bool = False, level_name: str | None = None) -> int:
    """
    Resolve the logging level for a run.

    @param verbose (bool): Force INFO level
    @param level_name (str | None): Level name override (defaults to KEYCHECK_LOG_LEVEL)
    @returns int - Logging level
    """

    if verbose:
        return logging.INFO

    # Unknown names fall back to WARNING so a bad setting never breaks a check
    level = logging.getLevelName((level_name or LOG_LEVEL).upper())
    if not isinstance(level, int):
        return logging.WARNING

    return level


def configure_logging(verbose: bool = False) -> int:
    """
    Send keycheck log records to stderr.

    @param verbose (bool): Enable INFO level logging
    @returns int - Logging level applied to the keycheck logger
    """

    level = resolve_log_level(verbose=verbose)

    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    logger.debug("Logging configured (level=%s)", logging.getLevelName(level))
    return level
