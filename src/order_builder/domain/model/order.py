"""Order aggregate: the in-progress wizard session.

The Order owns everything the customer has picked so far: who they are,
which plan they want, the contract term and the add-on line items.  It is
deliberately allowed to be incomplete; totals are computed from whatever
is present (see ``order_builder.domain.service.pricing``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date

from dateutil.relativedelta import relativedelta

from order_builder.domain.exceptions import EntityNotFoundError, ValidationError
from order_builder.domain.model.catalog import AddOn, Plan, Product
from order_builder.domain.model.value_objects import Money


@dataclass(frozen=True)
class WizardStep:
    id: int
    title: str
    description: str


WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep(1, "Customer Information", "Enter customer details and address"),
    WizardStep(2, "Product & Plan", "Select product and pricing plan"),
    WizardStep(3, "Contract Details", "Set contract dates and duration"),
    WizardStep(4, "Review & Finalize", "Review order and configure add-ons"),
)
FIRST_STEP = WIZARD_STEPS[0].id
LAST_STEP = WIZARD_STEPS[-1].id

DEFAULT_DURATION_MONTHS = 12


@dataclass
class Address:
    line1: str
    city: str
    state: str
    zip: str
    line2: str = ""


@dataclass
class Customer:
    name: str = ""
    pre_populated: bool = False
    company_address: Address | None = None


@dataclass
class Contract:
    """Contract term.  ``end_date`` is always derived, never stored.

    Month arithmetic clamps to the end of the month, so a contract
    starting on Jan 31 for one month ends on the last day of February.
    """

    start_date: date | None = None
    duration_months: int = DEFAULT_DURATION_MONTHS

    @property
    def end_date(self) -> date | None:
        if self.start_date is None or self.duration_months <= 0:
            return None
        return self.start_date + relativedelta(months=self.duration_months)


@dataclass
class Order:
    """Aggregate root for an order under construction.

    Use ``Order.create()`` to start a fresh order seeded with the catalog
    add-ons.  The ``__init__`` stays simple so the draft repository can
    reconstitute a half-finished order without re-validating it.
    """

    customer: Customer = field(default_factory=Customer)
    product: Product | None = None
    selected_plan: Plan | None = None
    contract: Contract = field(default_factory=Contract)
    add_ons: list[AddOn] = field(default_factory=list)
    current_step: int = FIRST_STEP

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(catalog_add_ons: list[AddOn]) -> Order:
        """Start a new order; every add-on begins excluded at quantity 0."""
        return Order(add_ons=[addon.fresh_copy() for addon in catalog_add_ons])

    # --- Customer -------------------------------------------------------------

    def update_customer(
        self,
        name: str | None = None,
        pre_populated: bool | None = None,
        company_address: Address | None = None,
    ) -> None:
        """Merge the given fields into the customer; omitted fields are kept."""
        if name is not None:
            self.customer.name = name
        if pre_populated is not None:
            self.customer.pre_populated = pre_populated
        if company_address is not None:
            self.customer.company_address = company_address

    # --- Product & plan -------------------------------------------------------

    def select_plan(
        self,
        product: Product,
        plan_id: str,
        custom_price: Money | None = None,
    ) -> None:
        """Pick a plan of *product*, optionally at a negotiated price.

        The plan is copied so a price override stays local to this order.
        """
        plan = replace(product.get_plan(plan_id))
        if custom_price is not None:
            plan.override_price(custom_price)
        self.product = product
        self.selected_plan = plan

    def override_plan_price(self, new_price: Money) -> None:
        if self.selected_plan is None:
            raise ValidationError("Select a plan before changing its price")
        self.selected_plan.override_price(new_price)

    # --- Contract -------------------------------------------------------------

    def set_contract(
        self,
        start_date: date | None = None,
        duration_months: int | None = None,
    ) -> None:
        if duration_months is not None:
            if isinstance(duration_months, bool) or not isinstance(duration_months, int):
                raise ValidationError("Duration must be a whole number of months")
            self.contract.duration_months = duration_months
        if start_date is not None:
            self.contract.start_date = start_date

    # --- Add-ons --------------------------------------------------------------

    def get_add_on(self, add_on_id: str) -> AddOn:
        for addon in self.add_ons:
            if addon.id == add_on_id:
                return addon
        raise EntityNotFoundError(f"Add-on '{add_on_id}' not found in this order")

    def toggle_add_on(self, add_on_id: str) -> None:
        self.get_add_on(add_on_id).toggle()

    def include_add_on(self, add_on_id: str, included: bool) -> None:
        self.get_add_on(add_on_id).included = included

    def set_add_on_quantity(self, add_on_id: str, quantity: int) -> None:
        self.get_add_on(add_on_id).set_quantity(quantity)

    def override_add_on_price(self, add_on_id: str, new_price: Money) -> None:
        self.get_add_on(add_on_id).override_price(new_price)

    # --- Wizard navigation ----------------------------------------------------

    def go_to_step(self, step: int) -> None:
        if step < FIRST_STEP or step > LAST_STEP:
            raise ValidationError(
                f"Step must be between {FIRST_STEP} and {LAST_STEP}, got {step}"
            )
        self.current_step = step

    def next_step(self) -> None:
        if self.current_step < LAST_STEP:
            self.current_step += 1

    def prev_step(self) -> None:
        if self.current_step > FIRST_STEP:
            self.current_step -= 1

    @property
    def step(self) -> WizardStep:
        return WIZARD_STEPS[self.current_step - 1]
