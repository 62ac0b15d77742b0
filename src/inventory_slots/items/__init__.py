from .model import Item, ItemStack

__all__ = ["Item", "ItemStack"]
