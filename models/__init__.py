from .inventory import InventoryItem
