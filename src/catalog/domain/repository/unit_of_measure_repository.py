"""Abstract repository for the UnitOfMeasure aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.unit_of_measure import UnitOfMeasure


class UnitOfMeasureRepository(ABC):

    @abstractmethod
    def get_by_id(self, unit_id: str) -> UnitOfMeasure | None:
        """Return a unit by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> UnitOfMeasure | None:
        """Return a unit by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[UnitOfMeasure]:
        """Return every unit of measure."""

    @abstractmethod
    def add(self, unit: UnitOfMeasure) -> None:
        """Persist a new unit."""

    @abstractmethod
    def update(self, unit: UnitOfMeasure) -> None:
        """Persist changes to an existing unit."""

    @abstractmethod
    def delete(self, unit: UnitOfMeasure) -> None:
        """Remove a unit."""
