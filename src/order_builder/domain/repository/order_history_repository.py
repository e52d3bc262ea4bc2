"""Abstract repository for finalized orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_builder.domain.model.order_record import OrderRecord


class OrderHistoryRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[OrderRecord]:
        """Return every finalized order, newest first."""

    @abstractmethod
    def get_by_id(self, record_id: str) -> OrderRecord | None:
        """Return a finalized order by its ID, or None if not found."""

    @abstractmethod
    def save(self, record: OrderRecord) -> None:
        """Store a finalized order ahead of the existing ones."""

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Remove a finalized order; return False if it did not exist."""
