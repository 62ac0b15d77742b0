from .inventory import DEFAULT_SIZE, AddResult, Inventory, merge_stacks

__all__ = ["AddResult", "DEFAULT_SIZE", "Inventory", "merge_stacks"]
