#
# Imports
#

# Standard library
import logging
from collections.abc import Mapping, Sequence
from typing import Optional

# Errors
from keycheck.errors import EqualityNoInputError, KeySetMismatchError

# Key count helpers
from keycheck.keys.validate_key_lengths import label_for

# Configure logging
logger = logging.getLogger(__name__)

#
# Helper Functions
#


def sorted_keys(data: Mapping[str, str]) -> list[str]:
    """Canonical key order for comparison, independent of insertion order"""
    return sorted(data.keys())


def key_difference(reference: list[str], keys: list[str]) -> tuple[list[str], list[str]]:
    """
    Compare a key list against the reference

    @param reference (list[str]): Sorted keys of the first file
    @param keys (list[str]): Sorted keys of the file being compared
    @returns tuple[list[str], list[str]] - (keys missing from the file, keys only in the file)
    """

    missing = sorted(set(reference) - set(keys))
    extra = sorted(set(keys) - set(reference))

    return missing, extra


#
# Handler Functions
#


def validate_key_sets(
    maps: Sequence[Mapping[str, str]], paths: Optional[Sequence[str]] = None
) -> None:
    """
    Check that every map has exactly the same keys as the first one

    Values are never compared. The first map is the reference; the check
    stops at the first map whose sorted keys differ from it.

    @param maps (Sequence[Mapping[str, str]]): Parsed files in caller order
    @param paths (Optional[Sequence[str]]): Source paths, used only to name files in errors
    @raises EqualityNoInputError - If no maps are given
    @raises KeySetMismatchError - On the first map whose keys differ
    """

    if len(maps) == 0:
        raise EqualityNoInputError()

    key_lists = [sorted_keys(data) for data in maps]
    reference = key_lists[0]

    for index, keys in enumerate(key_lists[1:], start=1):
        if keys == reference:
            continue

        missing, extra = key_difference(reference, keys)

        # Report what the differing file lacks and what it adds
        parts = []
        if missing:
            parts.append(f"missing {missing}")
        if extra:
            parts.append(f"extra {extra}")

        raise KeySetMismatchError(
            detail=(
                f"{label_for(index, paths)} differs from {label_for(0, paths)} "
                f"({', '.join(parts)})"
            ),
            index=index,
            missing=missing,
            extra=extra,
        )

    logger.debug("Key sets match across %d files", len(key_lists))
