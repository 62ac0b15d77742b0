import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from inventory_slots.items import Item  # noqa: E402


@pytest.fixture()
def wood() -> Item:
    return Item(id="wood", name="Wood")


@pytest.fixture()
def stone() -> Item:
    return Item(id="stone", name="Stone")


@pytest.fixture()
def sword() -> Item:
    return Item(id="sword", name="Iron Sword", stackable=False)
