#
# Imports
#

# Standard library
import logging
from collections.abc import Mapping, Sequence
from typing import Optional

# Errors
from keycheck.errors import EmptyFileError, LengthMismatchError, LengthNoInputError

# Configure logging
logger = logging.getLogger(__name__)

#
# Helper Functions
#


def label_for(index: int, paths: Optional[Sequence[str]] = None) -> str:
    """Name a map by its source path, or by its position when no paths are given"""
    if paths is not None and index < len(paths):
        return str(paths[index])
    return f"file #{index + 1}"


#
# Handler Functions
#


def validate_key_lengths(
    maps: Sequence[Mapping[str, str]], paths: Optional[Sequence[str]] = None
) -> None:
    """
    Check that every map has the same, non-zero number of entries

    A cheap filter run before the key set comparison: equal counts are
    necessary but not sufficient for equal key sets. One empty map fails the
    whole batch, even when the others are not empty.

    @param maps (Sequence[Mapping[str, str]]): Parsed files in caller order
    @param paths (Optional[Sequence[str]]): Source paths, used only to name files in errors
    @raises LengthNoInputError - If no maps are given
    @raises EmptyFileError - If any map has no entries
    @raises LengthMismatchError - If the entry counts differ
    """

    if len(maps) == 0:
        raise LengthNoInputError()

    counts = [len(data) for data in maps]
    smallest = min(counts)
    largest = max(counts)

    # Empty files are reported ahead of count mismatches
    if smallest == 0:
        index = counts.index(0)
        raise EmptyFileError(path=label_for(index, paths), index=index)

    if smallest != largest:
        smallest_index = counts.index(smallest)
        largest_index = counts.index(largest)
        raise LengthMismatchError(
            detail=(
                f"{label_for(largest_index, paths)} has {largest} keys, "
                f"{label_for(smallest_index, paths)} has {smallest}"
            ),
            counts=counts,
        )

    logger.debug("Key counts match (%d keys in %d files)", smallest, len(counts))
