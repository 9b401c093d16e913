#
# Imports
#

# Standard library
import logging
from collections.abc import Sequence
from os import PathLike

# Errors
from keycheck.errors import ExtensionError

# Configure logging
logger = logging.getLogger(__name__)

#
# Constants
#

# Allowed file extensions (case-sensitive, not configurable)
ALLOWED_EXTENSIONS = (".json", ".arb")


#
# Handler Functions
#


def has_allowed_extension(path: str | PathLike) -> bool:
    """Check a single path against ALLOWED_EXTENSIONS"""
    return str(path).endswith(ALLOWED_EXTENSIONS)


def validate_extensions(paths: Sequence[str | PathLike]) -> None:
    """
    Check that every path ends with .json or .arb

    Stops at the first path with another suffix. An empty list passes; the
    minimum file count is enforced by check_files.

    @param paths (Sequence[str]): File paths in caller order
    @raises ExtensionError - On the first path with a disallowed extension
    """

    for index, path in enumerate(paths):
        if not has_allowed_extension(path):
            logger.debug("Rejected extension for %s (index=%d)", path, index)
            raise ExtensionError(path=path, index=index)

    logger.debug("Extensions valid for %d paths", len(paths))
