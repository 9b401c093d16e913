#
# Imports
#

# Standard library
import random
from typing import Callable

# Third party
import pytest

#
# Helper Functions
#


def make_map(keys: list[str], value: str = "value") -> dict[str, str]:
    """Build a flat map where every key maps to a value derived from `value`"""
    return {key: f"{value}-{key}" for key in keys}


#
# Fixtures
#


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator so generated maps are reproducible"""
    return random.Random(20240601)


@pytest.fixture
def same_key_maps(rng: random.Random) -> Callable[[int, int], list[dict[str, str]]]:
    """Factory for `count` maps sharing `size` keys, each in a shuffled order with its own values"""

    def _make(count: int, size: int) -> list[dict[str, str]]:
        keys = [f"key_{i}" for i in range(size)]
        maps = []
        for n in range(count):
            shuffled = keys[:]
            rng.shuffle(shuffled)
            maps.append(make_map(shuffled, value=f"v{n}"))
        return maps

    return _make
