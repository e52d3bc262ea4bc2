"""Abstract repository for the order currently being built."""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_builder.domain.model.order import Order


class DraftOrderRepository(ABC):

    @abstractmethod
    def load(self) -> Order | None:
        """Return the saved draft, or None if no order is in progress."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist the draft, replacing any previous one."""

    @abstractmethod
    def clear(self) -> None:
        """Discard the draft."""
