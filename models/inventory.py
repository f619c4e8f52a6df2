import uuid

from sqlalchemy import BigInteger, Column, String, DateTime
from sqlalchemy.sql import func
from database import Base


def new_item_id() -> str:
    return uuid.uuid4().hex


class InventoryItem(Base):
    __tablename__ = 'inventory_items'

    id = Column(String(32), primary_key=True, index=True, default=new_item_id)
    name = Column(String, nullable=False)
    quantity = Column(BigInteger, nullable=False, default=0)
    description = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
