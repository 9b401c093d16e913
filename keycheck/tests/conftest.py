#
# Imports
#

# Standard library
import json
from pathlib import Path
from typing import Callable

# Third party
import pytest

#
# Fixtures
#


@pytest.fixture
def locale_files(tmp_path: Path) -> Callable[..., list[str]]:
    """
    Factory that writes one file per (name, data) pair and returns their paths

    Data that is a str is written as-is; anything else is serialized as JSON.
    """

    def _write(*files: tuple[str, object]) -> list[str]:
        paths = []
        for name, data in files:
            path = tmp_path / name
            content = data if isinstance(data, str) else json.dumps(data)
            path.write_text(content, encoding="utf-8")
            paths.append(str(path))
        return paths

    return _write
