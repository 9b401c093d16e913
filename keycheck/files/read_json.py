#
# Imports
#

# Standard library
import json
import logging
from os import PathLike

# Errors
from keycheck.errors import DecodeFailedError, OpenFailedError

# Configure logging
logger = logging.getLogger(__name__)

#
# Handler Functions
#


def read_json(path: str | PathLike) -> dict[str, str]:
    """
    Read a .json or .arb file into a flat string-to-string map

    The file must hold a single JSON object whose values are all strings.
    .arb files are parsed as plain JSON. Duplicate keys resolve to the last
    value, so the map size is the number of distinct keys.

    @param path (str | PathLike): Path to the file
    @returns dict[str, str] - Keys and values of the file
    @raises OpenFailedError - If the file cannot be opened or read
    @raises DecodeFailedError - If the contents are not a flat string map
    """

    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise OpenFailedError(path=path) from e

    # ValueError covers JSONDecodeError and the int digit limit; RecursionError covers deep nesting
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeFailedError(path=path) from e

    # Validate that it's a dictionary
    if not isinstance(data, dict):
        raise DecodeFailedError(
            path=path, detail=f"expected a JSON object, found {type(data).__name__}"
        )

    # Validate values (JSON object keys are always strings)
    for key, value in data.items():
        if not isinstance(value, str):
            raise DecodeFailedError(
                path=path,
                detail=f"value for key '{key}' must be a string, found {type(value).__name__}",
                key=key,
            )

    logger.debug("Read %d keys from %s", len(data), path)
    return data
