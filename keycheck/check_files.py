#
# Imports
#

# Standard library
import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any, Optional

# Configuration
from keycheck.config import VERSION, configure_logging

# Errors
from keycheck.errors import KeyCheckError, UsageError

# Pipeline stages
from keycheck.files.read_json import read_json
from keycheck.files.validate_exists import validate_exists
from keycheck.files.validate_extensions import validate_extensions
from keycheck.keys.validate_key_lengths import validate_key_lengths
from keycheck.keys.validate_key_sets import validate_key_sets

# Configure logging
logger = logging.getLogger(__name__)

#
# Helper Functions
#


def split_file_args(values: Optional[Sequence[str]]) -> list[str]:
    """
    Flatten --file values, splitting each one on spaces

    Supports both `--file a.json --file b.arb` and `--file "a.json b.arb"`.

    @param values (Optional[Sequence[str]]): Raw --file values
    @returns list[str] - File paths in the order given
    """

    files = []
    for value in values or []:
        files.extend(part for part in value.split(" ") if part)

    return files


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser for the keycheck CLI"""
    parser = argparse.ArgumentParser(
        prog="keycheck",
        description="Check that JSON or arb files have the same set of keys",
    )
    parser.add_argument(
        "-f",
        "--file",
        action="append",
        required=True,
        help="JSON or arb file to check (repeat the option or separate paths with spaces)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log each pipeline stage to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


#
# Handler Functions
#


def check_files(files: Sequence[str]) -> dict[str, Any]:
    """
    Run the full key check over a list of files

    Stages run in order and the first failure is raised unchanged:
    extensions, existence, parsing, key counts, key sets.

    @param files (Sequence[str]): At least two file paths, in caller order
    @returns Dict[str, Any] - Response with status and counts
    @raises KeyCheckError - The first failure of any stage
    """

    logger.info("check_files called")

    if len(files) < 2:
        raise UsageError(detail=f"got {len(files)}")

    validate_extensions(files)

    for file in files:
        validate_exists(file)

    # Read sequentially; each file is closed before the next is opened
    maps = [read_json(file) for file in files]

    validate_key_lengths(maps, paths=files)
    validate_key_sets(maps, paths=files)

    keys_checked = len(maps[0])
    logger.info(f"check_files completed: {len(files)} files checked, {keys_checked} keys each")
    return {
        "status": "success",
        "message": f"All {len(files)} files have the same keys ({keys_checked} keys each)",
        "files_checked": len(files),
        "keys_checked": keys_checked,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point

    Prints nothing on success. On a validation failure prints one error line
    to stderr and returns 1. Unexpected exceptions are left to propagate.

    @param argv (Optional[Sequence[str]]): Arguments (defaults to sys.argv)
    @returns int - Process exit code
    """

    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        check_files(split_file_args(args.file))
    except KeyCheckError as e:
        logger.debug("check_files failed: %s", e.to_dict())
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
