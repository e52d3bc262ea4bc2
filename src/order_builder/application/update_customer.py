"""Application service: Update Customer use case (wizard step 1)."""

from __future__ import annotations

from order_builder.application.draft_session import load_draft
from order_builder.domain.model.order import Address, Customer
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository


class UpdateCustomerHandler:

    def __init__(self, draft_repo: DraftOrderRepository) -> None:
        self._draft_repo = draft_repo

    def handle(
        self,
        name: str | None = None,
        pre_populated: bool | None = None,
        company_address: Address | None = None,
    ) -> Customer:
        order = load_draft(self._draft_repo)
        order.update_customer(
            name=name,
            pre_populated=pre_populated,
            company_address=company_address,
        )
        self._draft_repo.save(order)
        return order.customer
