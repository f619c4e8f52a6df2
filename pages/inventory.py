from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from crud.inventory import InventoryRepository, get_repository
from pages import templates
from utils.forms import parse_item_form, parse_item_id
from utils.view_cache import PageCache, get_page_cache

router = APIRouter()

LIST_PATH = "/"
CREATE_PATH = "/inventory"


def _redirect(path: str) -> RedirectResponse:
    return RedirectResponse(url=path, status_code=303)


@router.get("/", response_class=HTMLResponse)
def list_page(repository: InventoryRepository = Depends(get_repository),
              cache: PageCache = Depends(get_page_cache)):
    return cache.get_or_render(LIST_PATH, lambda: templates.render_item_list(repository.list_all()))


@router.get("/inventory", response_class=HTMLResponse)
def create_page():
    return templates.render_create_form()


@router.post("/inventory")
def add_item(name: Optional[str] = Form(None),
             quantity: Optional[str] = Form(None),
             description: Optional[str] = Form(None),
             repository: InventoryRepository = Depends(get_repository),
             cache: PageCache = Depends(get_page_cache)):
    repository.create(parse_item_form(name, quantity, description))
    cache.revalidate_path(CREATE_PATH)
    cache.revalidate_path(LIST_PATH)
    return _redirect(CREATE_PATH)


@router.post("/inventory/update")
def update_item(id: Optional[str] = Form(None),
                name: Optional[str] = Form(None),
                quantity: Optional[str] = Form(None),
                description: Optional[str] = Form(None),
                repository: InventoryRepository = Depends(get_repository),
                cache: PageCache = Depends(get_page_cache)):
    item = repository.update(parse_item_id(id), parse_item_form(name, quantity, description))
    if item is None:
        raise HTTPException(status_code=404, detail="Inventory item is not found")
    cache.revalidate_path(LIST_PATH)
    return _redirect(LIST_PATH)


@router.post("/inventory/delete")
def delete_item(id: Optional[str] = Form(None),
                repository: InventoryRepository = Depends(get_repository),
                cache: PageCache = Depends(get_page_cache)):
    repository.delete(parse_item_id(id))
    cache.revalidate_path(LIST_PATH)
    return _redirect(LIST_PATH)


@router.get("/inventory/{item_id}", response_class=HTMLResponse)
def update_page(item_id: str, repository: InventoryRepository = Depends(get_repository)):
    item = repository.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Inventory item is not found")
    return templates.render_update_form(item)
