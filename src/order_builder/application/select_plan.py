"""Application service: Select Plan use case (wizard step 2).

Resolves the product from the catalog and puts a copy of the chosen plan
on the order, optionally at a custom price.
"""

from __future__ import annotations

import logging

from order_builder.application.draft_session import load_draft
from order_builder.domain.exceptions import EntityNotFoundError
from order_builder.domain.model.catalog import Plan
from order_builder.domain.model.value_objects import Money
from order_builder.domain.repository.catalog_repository import CatalogRepository
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository

logger = logging.getLogger(__name__)


class SelectPlanHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        draft_repo: DraftOrderRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._draft_repo = draft_repo

    def handle(self, product_id: str, plan_id: str, price: str | None = None) -> Plan:
        """Select *plan_id* of *product_id*.

        *price* is parsed strictly: a malformed amount is rejected rather
        than silently replaced.
        """
        custom_price = Money.of(price) if price is not None else None

        order = load_draft(self._draft_repo)
        product = self._catalog_repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        order.select_plan(product, plan_id, custom_price=custom_price)
        self._draft_repo.save(order)

        plan = order.selected_plan
        logger.info("Selected plan %s of %s at %s", plan.id, product.id, plan.price)
        return plan
