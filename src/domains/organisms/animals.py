"""
Animals: Animal (abstract) -> Canidae -> Dog.

Each level may override respire(); the most-derived override is the one that
runs, so a Dog pants like a dog even though Canidae pants too.
"""

from __future__ import annotations

from abc import abstractmethod

from src.domains.organisms.organism import Organism, is_valid_age
from src.utils.logger import get_logger

logger = get_logger()


class Animal(Organism):
    """
    Base for all animals. Holds species and a non-negative age.

    Invalid ages are tolerated: set_age() logs a warning and keeps the old
    value instead of raising.
    """

    def __init__(self, species: str, age: int) -> None:
        self._species = species
        if not is_valid_age(age):
            logger.warning("Age cannot be negative (%s for %s); using 0", age, species)
            age = 0
        self._age = age

    def respire(self) -> str:
        return self._report(f"{self._species} is respiring.")

    @abstractmethod
    def move(self) -> str:
        """Report how this animal moves."""

    def make_sound(self) -> str:
        return self._report(f"{self._species} is making a sound")

    @property
    def species(self) -> str:
        return self._species

    def set_species(self, species: str) -> None:
        self._species = species

    @property
    def age(self) -> int:
        return self._age

    def set_age(self, age: int) -> bool:
        if not is_valid_age(age):
            logger.warning("Age cannot be negative: %s (keeping %s)", age, self._age)
            return False
        self._age = age
        return True

    def __str__(self) -> str:
        return f"Species: {self._species}, Age: {self._age}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(species={self._species!r}, age={self._age!r})"


class Canidae(Animal):
    """Dog family. Pants instead of plain respiring."""

    def respire(self) -> str:
        return self._report("Canidae is panting.")

    def move(self) -> str:
        return self._report("Canidae is moving.")


class Dog(Canidae):
    def respire(self) -> str:
        return self._report("Dog is panting.")
