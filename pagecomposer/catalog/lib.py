"""Snippet catalog: the registry of fragments a page can be built from.

The catalog is owned by the front-end; the composer only needs its data
shape. Items are grouped by category, in a fixed order, and each carries an
opaque markup template.

Catalog files are JSON objects mapping category names to lists of items:

    {
      "Buttons": [
        {"name": "PrimaryButton", "code": "<button>Click</button>"}
      ]
    }
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pagecomposer.core.log import get_logger

logger = get_logger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or parsed."""


class CatalogItem(BaseModel):
    """A single catalog entry.

    Attributes:
        name: Item name, unique within its category.
        fragment_template: Markup source inserted into generated pages.
        preview: Renderable preview object (front-end only, never serialized).
    """

    name: str = Field(..., min_length=1)
    fragment_template: str = Field(..., alias="code")
    preview: Any = Field(default=None, exclude=True)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Catalog:
    """Ordered registry of catalog items grouped by category.

    Example:
        >>> catalog = Catalog()
        >>> catalog.add("Buttons", CatalogItem(name="Primary", code="<button/>"))
        >>> catalog.categories()
        ['Buttons']
    """

    def __init__(self, entries: dict[str, list[CatalogItem]] | None = None) -> None:
        self._entries: dict[str, list[CatalogItem]] = {}
        for category, items in (entries or {}).items():
            for item in items:
                self.add(category, item)

    def __len__(self) -> int:
        return sum(len(items) for items in self._entries.values())

    def __contains__(self, category: str) -> bool:
        return category in self._entries

    def add(self, category: str, item: CatalogItem) -> None:
        """Append an item to a category, replacing one with the same name."""
        items = self._entries.setdefault(category, [])
        for index, existing in enumerate(items):
            if existing.name == item.name:
                items[index] = item
                return
        items.append(item)

    def categories(self) -> list[str]:
        """Category names in registration order."""
        return list(self._entries)

    def items(self, category: str) -> list[CatalogItem]:
        """Items in a category, in order. Unknown categories are empty."""
        return list(self._entries.get(category, []))

    def get_item(self, category: str, name: str) -> CatalogItem:
        """Look up an item.

        Raises:
            KeyError: If the category or item does not exist.
        """
        for item in self._entries.get(category, []):
            if item.name == name:
                return item
        available = ", ".join(item.name for item in self.items(category)) or "(none)"
        raise KeyError(
            f"Unknown catalog item '{category}/{name}'. Available: {available}"
        )

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Serialize to the on-disk JSON shape."""
        return {
            category: [item.model_dump(by_alias=True) for item in items]
            for category, items in self._entries.items()
        }


def parse_catalog(data: dict[str, Any]) -> Catalog:
    """Build a catalog from the JSON shape.

    Raises:
        CatalogError: If the data does not match the catalog shape.
    """
    if not isinstance(data, dict):
        raise CatalogError("Catalog must be a JSON object of categories")

    catalog = Catalog()
    for category, raw_items in data.items():
        if not isinstance(raw_items, list):
            raise CatalogError(f"Category '{category}' must be a list of items")
        for raw in raw_items:
            try:
                catalog.add(category, CatalogItem.model_validate(raw))
            except ValidationError as e:
                raise CatalogError(f"Invalid item in '{category}': {e}") from e
    return catalog


def load_catalog(path: Path | str) -> Catalog:
    """Load a catalog from a JSON file.

    Args:
        path: Path to the catalog file.

    Returns:
        Catalog: Parsed catalog.

    Raises:
        CatalogError: If the file is missing, not JSON, or malformed.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e

    catalog = parse_catalog(data)
    logger.debug(
        f"Loaded {len(catalog)} items in {len(catalog.categories())} "
        f"categories from {path}"
    )
    return catalog


def default_catalog() -> Catalog:
    """Small built-in catalog used when no catalog file is configured."""
    return parse_catalog(
        {
            "Buttons": [
                {
                    "name": "PrimaryButton",
                    "code": '<button className="px-4 py-2 bg-blue-600 text-white rounded">Click</button>',
                },
                {
                    "name": "OutlineButton",
                    "code": '<button className="px-4 py-2 border rounded" style={{ borderColor: \'#2563eb\' }}>Outline</button>',
                },
            ],
            "Headers": [
                {
                    "name": "SimpleHeader",
                    "code": '<div className="p-6 bg-white shadow">\n  <h1 className="text-2xl font-bold">Brand</h1>\n</div>',
                },
            ],
            "Navigation": [
                {
                    "name": "TopNav",
                    "code": '<ul className="flex gap-4">\n  <li>Home</li>\n  <li>About</li>\n</ul>',
                },
            ],
            "Cards": [
                {
                    "name": "BasicCard",
                    "code": '<div className="rounded-lg shadow p-4">\n  <h3 className="font-semibold">Card title</h3>\n  <p>Card body</p>\n</div>',
                },
            ],
            "Forms": [
                {
                    "name": "EmailInput",
                    "code": '<input type="email" className="border rounded px-3 py-2" placeholder="you@example.com" />',
                },
            ],
            "Footers": [
                {
                    "name": "SimpleFooter",
                    "code": '<div className="p-4 text-center text-sm">&copy; 2024</div>',
                },
            ],
        }
    )
