import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.orm import Session

from crud.validation import validate_id, validate_item_fields
from database import ConnectionManager, connection_manager
from exceptions import ErrorKind, OperationError
from models.inventory import InventoryItem as InventoryItemModel
from schemas.inventory import InventoryItem, ItemFields

logger = logging.getLogger(__name__)


class InventoryRepository:
    """Create, read, update and delete inventory items.

    Input is validated before a connection is requested, so bad input never
    reaches the database. Store failures are logged and re-raised as an
    OperationError with a fixed message; the original error stays on
    ``cause``.
    """

    def __init__(self, connections: ConnectionManager):
        self.connections = connections

    @contextmanager
    def _session(self, kind: ErrorKind, message: str, item_id: Optional[str] = None) -> Iterator[Session]:
        db = self.connections.ensure_connection()
        session = db.session()
        try:
            yield session
        except Exception as e:
            session.rollback()
            logger.exception("inventory %s failed (id=%s)", kind.value, item_id)
            raise OperationError(message, kind=kind, cause=e) from e
        finally:
            session.close()

    def create(self, fields: ItemFields) -> InventoryItem:
        validate_item_fields(fields)
        with self._session(ErrorKind.CREATE, "failed to create item") as db:
            db_item = InventoryItemModel(
                name=fields.name,
                quantity=int(fields.quantity),
                description=fields.description,
            )
            db.add(db_item)
            db.commit()
            db.refresh(db_item)
            return InventoryItem.model_validate(db_item)

    def list_all(self) -> List[InventoryItem]:
        with self._session(ErrorKind.FETCH, "failed to fetch items") as db:
            return [InventoryItem.model_validate(row) for row in db.query(InventoryItemModel).all()]

    def get_by_id(self, item_id: str) -> Optional[InventoryItem]:
        validate_id(item_id)
        with self._session(ErrorKind.FETCH, "failed to fetch item", item_id) as db:
            db_item = db.get(InventoryItemModel, item_id)
            return InventoryItem.model_validate(db_item) if db_item else None

    def update(self, item_id: str, fields: ItemFields) -> Optional[InventoryItem]:
        validate_id(item_id)
        validate_item_fields(fields)
        with self._session(ErrorKind.UPDATE, "failed to update item", item_id) as db:
            db_item = db.get(InventoryItemModel, item_id)
            if db_item is None:
                return None
            db_item.name = fields.name
            db_item.quantity = int(fields.quantity)
            db_item.description = fields.description
            db.commit()
            db.refresh(db_item)
            return InventoryItem.model_validate(db_item)

    def delete(self, item_id: str) -> bool:
        validate_id(item_id)
        with self._session(ErrorKind.DELETE, "failed to delete item", item_id) as db:
            db_item = db.get(InventoryItemModel, item_id)
            if db_item is None:
                return False
            db.delete(db_item)
            db.commit()
            return True


repository = InventoryRepository(connection_manager)


def get_repository() -> InventoryRepository:
    return repository
