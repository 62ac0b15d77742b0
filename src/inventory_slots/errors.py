class InventorySlotsError(Exception):
    """Base exception for the inventory_slots package."""


class InventoryError(InventorySlotsError):
    """Raised when an inventory operation is rejected."""


class InventoryFullError(InventoryError):
    """Raised when a new item type needs a slot but every slot is taken."""


class DuplicateItemTypeError(InventoryError):
    """Raised when two slots hold stacks of the same item type, or a held stack is added again."""


class NotStackableError(InventoryError):
    """Raised when a non-stackable stack would grow beyond a single unit."""


class InvalidCapacityError(InventorySlotsError, ValueError):
    """Raised when an inventory is configured with a negative slot count."""


class InvalidConfigError(InventorySlotsError, ValueError):
    """Raised when a config file holds a value of the wrong type."""
