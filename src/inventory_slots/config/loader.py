from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.resources import files as resource_files
from typing import Optional

import yaml

from ..errors import InvalidCapacityError, InvalidConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryConfig:
    default_capacity: int = 10
    enforce_stackable: bool = True


def load_inventory_config(path: Optional[str] = None) -> InventoryConfig:
    """Load inventory configuration from YAML.

    If path is None, loads the embedded default resource at
    inventory_slots/config/inventory.yaml.

    Values must already have the right YAML type: ``default_capacity`` an
    integer, ``enforce_stackable`` a boolean. Quoted strings such as
    ``"false"`` are rejected with InvalidConfigError.
    """
    if path is None:
        data = resource_files("inventory_slots.config").joinpath("inventory.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded inventory config resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded inventory config from path: %s", path)

    raw = yaml.safe_load(data) or {}
    if not isinstance(raw, dict):
        raise InvalidConfigError(f"Inventory config must be a mapping, got {type(raw).__name__}")

    capacity = raw.get("default_capacity", InventoryConfig.default_capacity)
    # bool is an int subclass
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidConfigError(f"default_capacity must be an integer, got {capacity!r}")
    if capacity < 0:
        raise InvalidCapacityError(f"default_capacity must be >= 0, got {capacity}")

    enforce = raw.get("enforce_stackable", InventoryConfig.enforce_stackable)
    if not isinstance(enforce, bool):
        raise InvalidConfigError(f"enforce_stackable must be true or false, got {enforce!r}")

    logger.info("Inventory config: default_capacity=%s | enforce_stackable=%s", capacity, enforce)
    return InventoryConfig(default_capacity=capacity, enforce_stackable=enforce)
