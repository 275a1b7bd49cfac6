"""
Zoo: groups organisms into named exhibitions and drives their behavior.
"""

from __future__ import annotations

from src.domains.organisms.animals import Animal, Canidae, Dog
from src.domains.organisms.organism import Organism
from src.domains.organisms.plant import Plant
from src.utils.logger import get_logger

logger = get_logger()


def default_exhibitions() -> dict[str, list[Organism]]:
    """Residents used when a zoo is opened without its own exhibitions."""
    return {
        "Canids": [Canidae("General canidae", 10), Dog("Greyhound", 4)],
        "Gardens": [Plant("Rose", True)],
    }


class Zoo:
    """
    A named, addressed collection of exhibitions.

    Exhibitions map a display name to the organisms in it. Every organism must
    already exist when the zoo is built.
    """

    def __init__(
        self,
        name: str,
        address: str,
        exhibitions: dict[str, list[Organism]] | None = None,
    ) -> None:
        self.name = name
        self.address = address
        self.exhibitions = exhibitions if exhibitions is not None else default_exhibitions()
        logger.debug("Zoo %s opened with %d exhibitions", name, len(self.exhibitions))

    def residents(self) -> list[Organism]:
        """All organisms, in exhibition order."""
        return [o for members in self.exhibitions.values() for o in members]

    def make_noise(self) -> list[str]:
        """Every resident animal makes its sound."""
        return [o.make_sound() for o in self.residents() if isinstance(o, Animal)]

    def respire(self) -> list[str]:
        """Every resident plant respires."""
        return [o.respire() for o in self.residents() if isinstance(o, Plant)]
