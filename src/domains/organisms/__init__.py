"""Organism model: Organism contract, animals, plants, and the zoo."""

from src.domains.organisms.organism import Organism, is_valid_age
from src.domains.organisms.animals import Animal, Canidae, Dog
from src.domains.organisms.plant import Plant
from src.domains.organisms.zoo import Zoo, default_exhibitions

__all__ = [
    "Organism",
    "is_valid_age",
    "Animal",
    "Canidae",
    "Dog",
    "Plant",
    "Zoo",
    "default_exhibitions",
]
