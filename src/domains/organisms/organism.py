"""
Organism contract shared by animals and plants.

Every organism can respire, report whether it is alive, and expose its species
and age. Subclasses decide how each of those behaves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


def is_valid_age(age: int) -> bool:
    """Ages are whole, non-negative numbers."""
    return age >= 0


class Organism(ABC):
    """
    Capability set implemented by every living thing in the model.

    `respire()` prints a species-specific line and returns it. `is_alive`
    defaults to True; variants override it when liveness depends on state.
    """

    @abstractmethod
    def respire(self) -> str:
        """Report how this organism breathes. Must not raise."""

    @property
    def is_alive(self) -> bool:
        return True

    @property
    @abstractmethod
    def species(self) -> str:
        ...

    @abstractmethod
    def set_species(self, species: str) -> None:
        ...

    @property
    @abstractmethod
    def age(self) -> int:
        ...

    @abstractmethod
    def set_age(self, age: int) -> bool:
        """Apply a new age. Returns True when the value was accepted."""

    def _report(self, line: str) -> str:
        print(line)
        return line
