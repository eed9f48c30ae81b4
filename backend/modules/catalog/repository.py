"""
Product repository.

Owns all access to the product collection: seeding from a JSON file,
lookups, and the atomic inventory adjustments used by checkout.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError

from shared.repository import BaseRepository
from shared.store import KeyValueStore

from .models import Product


logger = logging.getLogger(__name__)


class ProductRepository(BaseRepository[Product]):
    """
    Repository for catalogue products.

    Inventory is only ever changed through try_debit() and restock(), each
    an atomic read-modify-write under the product's key lock.
    """

    def __init__(self, store: KeyValueStore[Product]) -> None:
        super().__init__(store)
        self._healthy = len(store) > 0

    def get(self, product_id: str) -> Optional[Product]:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        """All products in insertion order."""
        return self._store.values()

    def add(self, product: Product) -> None:
        self._store.set(product.id, product)
        self._healthy = True

    def lock(self, *product_ids: str):
        """Hold the key locks for the given products."""
        return self._store.lock(*product_ids)

    def try_debit(self, product_id: str, quantity: int) -> bool:
        """
        Subtract quantity from a product's inventory.

        Returns:
            False, with nothing changed, if the product is missing or the
            debit would leave negative inventory.
        """
        if quantity <= 0:
            raise ValueError("Debit quantity must be positive")

        with self._store.lock(product_id):
            product = self._store.get(product_id)
            if product is None or product.inventory < quantity:
                return False
            updated = product.model_copy(update={"inventory": product.inventory - quantity})
            return self._store.compare_and_set(product_id, product, updated)

    def restock(self, product_id: str, quantity: int) -> bool:
        """Add quantity back to a product's inventory. False if the product is gone."""
        if quantity <= 0:
            raise ValueError("Restock quantity must be positive")

        with self._store.lock(product_id):
            product = self._store.get(product_id)
            if product is None:
                return False
            updated = product.model_copy(update={"inventory": product.inventory + quantity})
            return self._store.compare_and_set(product_id, product, updated)

    def load_from_file(self, path: Union[str, Path]) -> int:
        """
        Replace the product collection with the contents of a JSON file.

        The file holds a JSON array of product objects. Any failure (missing
        file, bad JSON, invalid record) is logged and leaves the collection
        empty; startup continues with an empty catalogue.

        Returns:
            Number of products loaded
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
            if not isinstance(raw, list):
                raise ValueError("Product data must be a JSON array")
            products = [Product.model_validate(item) for item in raw]
        except OSError as e:
            logger.error(f"Product data file could not be read: {path} ({e})")
            return self._mark_empty()
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse {path}: invalid JSON ({e})")
            return self._mark_empty()
        except (PydanticValidationError, ValueError) as e:
            logger.error(f"Failed to load product data from {path}: {e}")
            return self._mark_empty()

        self._store.clear()
        for product in products:
            self._store.set(product.id, product)
        self._healthy = len(products) > 0

        logger.info(f"Loaded {len(products)} products from {path}")
        return len(products)

    def _mark_empty(self) -> int:
        self._store.clear()
        self._healthy = False
        logger.warning("Continuing with an empty product catalogue")
        return 0

    @property
    def is_healthy(self) -> bool:
        """True when products were loaded and the collection is non-empty."""
        return self._healthy and self.count() > 0
