"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from order_builder.domain.model.catalog import AddOn, Plan, Product
from order_builder.domain.model.value_objects import Money
from order_builder.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CatalogRepository interface ------------------------------------------

    def list_products(self) -> list[Product]:
        return [self._to_product(raw) for raw in self._load_raw()["products"]]

    def get_product(self, product_id: str) -> Product | None:
        for product in self.list_products():
            if product.id == product_id:
                return product
        return None

    def list_add_ons(self) -> list[AddOn]:
        return [self._to_add_on(raw) for raw in self._load_raw()["add_ons"]]

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_product(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            plans=[
                Plan(id=p["id"], name=p["name"], price=Money.of(p["price"]))
                for p in raw.get("plans", [])
            ],
        )

    @staticmethod
    def _to_add_on(raw: dict) -> AddOn:
        # Catalog add-ons always start excluded at quantity 0.
        return AddOn(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            unit_price=Money.of(raw["price"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        logger.debug("Loaded catalog from %s", self._file_path)
        return {"products": raw.get("products", []), "add_ons": raw.get("add_ons", [])}

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps({"products": [], "add_ons": []}, indent=2) + "\n",
                encoding="utf-8",
            )
