from unittest.mock import MagicMock

from crud.inventory import InventoryRepository, get_repository
from exceptions import DatabaseConnectionError, ErrorKind, OperationError
from main import app
from utils.forms import parse_item_form


def _create(repository, name="Test Item", quantity="10", description="Test Description"):
    return repository.create(parse_item_form(name, quantity, description))


def test_list_page_empty_state(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "No items in inventory yet." in r.text


def test_list_page_shows_items(client, repository):
    item = _create(repository)

    r = client.get("/")
    assert r.status_code == 200
    assert "Test Item" in r.text
    assert f'href="/inventory/{item.id}"' in r.text
    assert "No items in inventory yet." not in r.text


def test_list_page_is_cached_until_revalidated(client, repository, page_cache):
    client.get("/")
    assert page_cache.is_cached("/")

    _create(repository, name="Hidden")
    assert "Hidden" not in client.get("/").text

    page_cache.revalidate_path("/")
    assert "Hidden" in client.get("/").text


def test_create_form(client):
    r = client.get("/inventory")
    assert r.status_code == 200
    assert 'action="/inventory"' in r.text


def test_add_item_redirects_to_inventory(client, repository, page_cache):
    client.get("/")
    page_cache.get_or_render("/inventory", lambda: "stale")
    revalidate = MagicMock(wraps=page_cache.revalidate_path)
    page_cache.revalidate_path = revalidate

    r = client.post(
        "/inventory",
        data={"name": "Test Item", "quantity": "10", "description": "Test Description"},
        follow_redirects=False,
    )

    assert r.status_code == 303
    assert r.headers["location"] == "/inventory"
    revalidate.assert_any_call("/inventory")
    assert not page_cache.is_cached("/inventory")
    assert not page_cache.is_cached("/")
    [item] = repository.list_all()
    assert (item.name, item.quantity, item.description) == ("Test Item", 10, "Test Description")


def test_add_item_validation_error_renders_error_page(client, repository):
    r = client.post("/inventory", data={"name": "Test Item", "quantity": "abc", "description": "x"},
                    follow_redirects=False)

    assert r.status_code == 400
    assert "Something went wrong!" in r.text
    assert "quantity must be numeric" in r.text
    assert repository.list_all() == []


def test_add_item_missing_fields(client):
    r = client.post("/inventory", data={"name": "Test Item"}, follow_redirects=False)
    assert r.status_code == 400
    assert "all fields are required" in r.text


def test_update_page_prefills_form(client, repository):
    item = _create(repository)

    r = client.get(f"/inventory/{item.id}")
    assert r.status_code == 200
    assert "You are updating Test Item" in r.text
    assert f'name="id" value="{item.id}"' in r.text


def test_update_page_unknown_item(client):
    r = client.get("/inventory/does-not-exist")
    assert r.status_code == 404
    assert "Inventory item is not found" in r.text


def test_update_item_redirects_home(client, repository, page_cache):
    item = _create(repository)
    client.get("/")

    r = client.post(
        "/inventory/update",
        data={"id": item.id, "name": "Updated Item", "quantity": "20", "description": "Updated Description"},
        follow_redirects=False,
    )

    assert r.status_code == 303
    assert r.headers["location"] == "/"
    assert not page_cache.is_cached("/")
    updated = repository.get_by_id(item.id)
    assert (updated.name, updated.quantity, updated.description) == ("Updated Item", 20, "Updated Description")


def test_update_item_requires_id(client):
    r = client.post("/inventory/update", data={"name": "a", "quantity": "1", "description": "b"},
                    follow_redirects=False)
    assert r.status_code == 400
    assert "id is required" in r.text


def test_delete_item_redirects_home(client, repository, page_cache):
    item = _create(repository)
    client.get("/")

    r = client.post("/inventory/delete", data={"id": item.id}, follow_redirects=False)

    assert r.status_code == 303
    assert r.headers["location"] == "/"
    assert not page_cache.is_cached("/")
    assert repository.get_by_id(item.id) is None


def test_store_failure_shows_fixed_message(client):
    failing = MagicMock(spec=InventoryRepository)
    failing.list_all.side_effect = OperationError(
        "failed to fetch items", kind=ErrorKind.FETCH, cause=RuntimeError("DB Error"))
    app.dependency_overrides[get_repository] = lambda: failing

    r = client.get("/")

    assert r.status_code == 500
    assert "failed to fetch items" in r.text
    assert "DB Error" not in r.text


def test_connection_failure_is_service_unavailable(client):
    failing = MagicMock(spec=InventoryRepository)
    failing.delete.side_effect = DatabaseConnectionError()
    app.dependency_overrides[get_repository] = lambda: failing

    r = client.post("/inventory/delete", data={"id": "123"}, follow_redirects=False)

    assert r.status_code == 503
    assert "failed to connect to database" in r.text
