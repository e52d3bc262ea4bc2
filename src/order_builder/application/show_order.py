"""Application service: Show Order use case (query).

Builds the review-step summary of the order in progress.  Totals are
recomputed from the current draft on every call.
"""

from __future__ import annotations

from order_builder.application.configure_add_on import to_add_on_dto
from order_builder.application.draft_session import load_draft, to_step_dto
from order_builder.application.dto import BreakdownDTO, OrderSummaryDTO
from order_builder.application.formatting import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    format_customer_name,
    format_date_range,
    format_duration,
    format_money,
    format_percentage,
)
from order_builder.domain.exceptions import EntityNotFoundError
from order_builder.domain.model.order import Order
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository
from order_builder.domain.service.pricing import (
    OrderBreakdown,
    calculate_discount_percentage,
    order_breakdown,
)


class ShowOrderHandler:

    def __init__(self, draft_repo: DraftOrderRepository) -> None:
        self._draft_repo = draft_repo

    def handle(
        self,
        currency: str = DEFAULT_CURRENCY,
        locale: str = DEFAULT_LOCALE,
    ) -> OrderSummaryDTO:
        order = load_draft(self._draft_repo)
        return self._to_dto(order, order_breakdown(order), currency, locale)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(
        order: Order,
        breakdown: OrderBreakdown,
        currency: str,
        locale: str,
    ) -> OrderSummaryDTO:
        def money(value) -> str:
            return format_money(value, currency, locale)

        address = order.customer.company_address
        plan = order.selected_plan

        return OrderSummaryDTO(
            step=to_step_dto(order),
            customer_name=format_customer_name(order.customer.name),
            company_address=(
                f"{address.line1}, {address.city}, {address.state} {address.zip}"
                if address is not None
                else ""
            ),
            product_name=order.product.name if order.product else "",
            plan_name=plan.name if plan else "",
            plan_price=money(plan.price) if plan else "",
            plan_discount=_plan_discount(order),
            contract_period=format_date_range(
                order.contract.start_date, order.contract.end_date
            ),
            duration=format_duration(order.contract.duration_months),
            add_ons=[to_add_on_dto(addon) for addon in order.add_ons],
            breakdown=BreakdownDTO(
                plan_total=money(breakdown.plan_total),
                add_ons_total=money(breakdown.add_ons_total),
                subtotal=money(breakdown.subtotal),
                tax=money(breakdown.tax),
                total=money(breakdown.total),
                mrr=money(breakdown.mrr),
            ),
        )


def _plan_discount(order: Order) -> str | None:
    """Discount of a custom plan price against the catalog price, if any."""
    if order.product is None or order.selected_plan is None:
        return None
    try:
        catalog_plan = order.product.get_plan(order.selected_plan.id)
    except EntityNotFoundError:
        return None
    if order.selected_plan.price.equals(catalog_plan.price):
        return None
    return format_percentage(
        calculate_discount_percentage(catalog_plan.price, order.selected_plan.price)
    )
