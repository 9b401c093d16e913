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
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory that writes raw text to tmp_path/<name> and returns the path"""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Factory that serializes data to tmp_path/<name> and returns the path"""

    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
