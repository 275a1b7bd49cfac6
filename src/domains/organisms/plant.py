"""
Plant: an Organism that is not an Animal.

Plants have no age, so age is always 0 and set_age() does nothing. Liveness is
the flowering flag.
"""

from __future__ import annotations

from src.domains.organisms.organism import Organism
from src.utils.logger import get_logger

logger = get_logger()


class Plant(Organism):
    def __init__(self, species: str, is_flowering: bool) -> None:
        self._species = species
        self._is_flowering = is_flowering

    def respire(self) -> str:
        return self._report(f"{self._species} is respiring through photosynthesis.")

    def grow(self) -> str:
        return self._report(f"{self._species} is growing.")

    @property
    def is_flowering(self) -> bool:
        return self._is_flowering

    @property
    def is_alive(self) -> bool:
        return self._is_flowering

    @property
    def species(self) -> str:
        return self._species

    def set_species(self, species: str) -> None:
        # Species is fixed at construction for plants.
        logger.debug("Ignoring species change for plant %s -> %s", self._species, species)

    @property
    def age(self) -> int:
        return 0

    def set_age(self, age: int) -> bool:
        logger.debug("Plants have no age; ignoring %s for %s", age, self._species)
        return False

    def __repr__(self) -> str:
        return f"Plant(species={self._species!r}, is_flowering={self._is_flowering!r})"
