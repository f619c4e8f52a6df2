from .inventory import InventoryItem, InventoryItemPayload, ItemFields
