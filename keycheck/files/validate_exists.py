#
# Imports
#

# Standard library
import logging
import os
import stat
from os import PathLike

# Errors
from keycheck.errors import NotAFileError, NotFoundError, ProbeFailedError

# Configure logging
logger = logging.getLogger(__name__)

#
# Handler Functions
#


def validate_exists(path: str | PathLike) -> None:
    """
    Check that a path exists and is a regular file

    Errors, in priority order:
    1. The filesystem probe itself fails (permission denied, I/O error)
    2. Nothing exists at the path
    3. Something exists but it is not a regular file (directory, fifo, ...)

    Symlinks are followed, so a link to a regular file passes.

    @param path (str | PathLike): Path to check
    @raises ProbeFailedError - If existence could not be determined
    @raises NotFoundError - If the path does not exist
    @raises NotAFileError - If the path is not a regular file
    """

    try:
        st = os.stat(path)
    except FileNotFoundError:
        logger.debug("Path not found: %s", path)
        raise NotFoundError(path=path) from None
    except OSError as e:
        logger.debug("Could not probe %s: %s", path, e)
        raise ProbeFailedError(path=path) from e

    if not stat.S_ISREG(st.st_mode):
        logger.debug("Path is not a regular file: %s", path)
        raise NotAFileError(path=path)
