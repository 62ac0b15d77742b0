from .loader import InventoryConfig, load_inventory_config

__all__ = ["InventoryConfig", "load_inventory_config"]
