from html import escape
from typing import Iterable, Optional

from schemas.inventory import InventoryItem


def _layout(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{escape(title)}</title>
</head>
<body>
{body}
</body>
</html>"""


def render_item_list(items: Iterable[InventoryItem]) -> str:
    rows = []
    for item in items:
        item_id = escape(item.id)
        rows.append(f"""      <tr>
        <td>{escape(item.name)}</td>
        <td>{item.quantity}</td>
        <td>{escape(item.description)}</td>
        <td>
          <a href="/inventory/{item_id}">Edit</a>
          <form action="/inventory/delete" method="post">
            <input type="hidden" name="id" value="{item_id}">
            <button type="submit">Delete</button>
          </form>
        </td>
      </tr>""")

    if rows:
        table_body = "\n".join(rows)
        empty_state = ""
    else:
        table_body = ""
        empty_state = '  <p class="empty">No items in inventory yet.</p>\n'

    body = f"""  <h1>Product Inventory</h1>
  <a href="/inventory">Add New Item</a>
  <table>
    <thead>
      <tr><th>Product Name</th><th>Quantity</th><th>Description</th><th>Actions</th></tr>
    </thead>
    <tbody>
{table_body}
    </tbody>
  </table>
{empty_state}"""
    return _layout("Product Inventory", body)


def _item_form(action: str, submit_label: str, item: Optional[InventoryItem] = None) -> str:
    hidden_id = f'    <input type="hidden" name="id" value="{escape(item.id)}">\n' if item else ""
    name = escape(item.name) if item else ""
    quantity = item.quantity if item else ""
    description = escape(item.description) if item else ""
    return f"""  <form action="{action}" method="post">
{hidden_id}    <label for="name">Name:</label>
    <input type="text" id="name" name="name" value="{name}" required>
    <label for="quantity">Quantity:</label>
    <input type="number" id="quantity" name="quantity" value="{quantity}" required>
    <label for="description">Description:</label>
    <textarea id="description" name="description" rows="4" required>{description}</textarea>
    <button type="submit">{submit_label}</button>
  </form>"""


def render_create_form() -> str:
    body = f"""  <h1>Add New Inventory Item</h1>
  <p>Fill out the form below to add a new item to your inventory.</p>
{_item_form("/inventory", "Add Inventory Item")}"""
    return _layout("Add New Inventory Item", body)


def render_update_form(item: InventoryItem) -> str:
    body = f"""  <h1>You are updating {escape(item.name)}</h1>
  <p>Fill out the form below to update this item in your inventory.</p>
{_item_form("/inventory/update", "Update Item", item)}"""
    return _layout(f"Update {item.name}", body)


def render_error(message: str, retry_path: str = "/") -> str:
    body = f"""  <h2>Something went wrong!</h2>
  <p class="error">{escape(message)}</p>
  <a href="{escape(retry_path)}">Try Again</a>"""
    return _layout("Error", body)
