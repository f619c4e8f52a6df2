from .inventory import InventoryRepository, get_repository
from .validation import validate_id, validate_item_fields
