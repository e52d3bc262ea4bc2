"""Application service: Configure Add-on use case (wizard step 4)."""

from __future__ import annotations

from order_builder.application.draft_session import load_draft
from order_builder.application.dto import AddOnLineDTO
from order_builder.application.formatting import format_currency, format_currency_precise
from order_builder.domain.model.catalog import AddOn
from order_builder.domain.model.value_objects import Money
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository
from order_builder.domain.service.pricing import line_item_total


class ConfigureAddOnHandler:

    def __init__(self, draft_repo: DraftOrderRepository) -> None:
        self._draft_repo = draft_repo

    def handle(
        self,
        add_on_id: str,
        included: bool | None = None,
        toggle: bool = False,
        quantity: int | None = None,
        price: str | None = None,
    ) -> AddOnLineDTO:
        """Apply the requested changes to one add-on.

        Price is parsed before anything is touched, so a malformed amount
        leaves the draft unchanged.
        """
        new_price = Money.of(price) if price is not None else None

        order = load_draft(self._draft_repo)
        addon = order.get_add_on(add_on_id)

        if toggle:
            addon.toggle()
        if included is not None:
            order.include_add_on(add_on_id, included)
        if quantity is not None:
            addon.set_quantity(quantity)
        if new_price is not None:
            addon.override_price(new_price)

        self._draft_repo.save(order)
        return to_add_on_dto(addon)


def to_add_on_dto(addon: AddOn) -> AddOnLineDTO:
    return AddOnLineDTO(
        id=addon.id,
        name=addon.name,
        description=addon.description,
        unit_price=format_currency_precise(addon.unit_price, 3),
        quantity=addon.quantity.value,
        included=addon.included,
        line_total=format_currency(line_item_total(addon)),
    )
