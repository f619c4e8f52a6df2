from fastapi import APIRouter, Depends, HTTPException
from typing import List
from crud.inventory import InventoryRepository, get_repository
from schemas.inventory import InventoryItem, InventoryItemPayload
from utils.forms import parse_item_form
from utils.view_cache import PageCache, get_page_cache

router = APIRouter()


def _fields(payload: InventoryItemPayload):
    return parse_item_form(payload.name, payload.quantity, payload.description)


@router.post("/", response_model=InventoryItem, status_code=201)
def create_inventory_item(payload: InventoryItemPayload,
                          repository: InventoryRepository = Depends(get_repository),
                          cache: PageCache = Depends(get_page_cache)):
    item = repository.create(_fields(payload))
    cache.revalidate_path("/inventory")
    cache.revalidate_path("/")
    return item

@router.get("/", response_model=List[InventoryItem])
def list_inventory_items(repository: InventoryRepository = Depends(get_repository)):
    return repository.list_all()

@router.get("/{item_id}", response_model=InventoryItem)
def get_inventory_item(item_id: str, repository: InventoryRepository = Depends(get_repository)):
    db_item = repository.get_by_id(item_id)
    if db_item is None:
        raise HTTPException(status_code=404, detail="Inventory item is not found")
    return db_item

@router.put("/{item_id}", response_model=InventoryItem)
def update_inventory_item(item_id: str, payload: InventoryItemPayload,
                          repository: InventoryRepository = Depends(get_repository),
                          cache: PageCache = Depends(get_page_cache)):
    db_item = repository.update(item_id, _fields(payload))
    if db_item is None:
        raise HTTPException(status_code=404, detail="Inventory item is not found")
    cache.revalidate_path("/")
    return db_item

@router.delete("/{item_id}")
def delete_inventory_item(item_id: str,
                          repository: InventoryRepository = Depends(get_repository),
                          cache: PageCache = Depends(get_page_cache)):
    success = repository.delete(item_id)
    if not success:
        raise HTTPException(status_code=404, detail="Inventory item is not found")
    cache.revalidate_path("/")
    return {"status": "success"}
