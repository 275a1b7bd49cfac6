"""
Tests for the organism model: Animal, Canidae, Dog, Plant.
"""

from __future__ import annotations

import logging

import pytest

from src.domains.organisms import Animal, Canidae, Dog, Organism, Plant, is_valid_age


def test_animal_is_abstract() -> None:
    """Animal and Organism cannot be instantiated directly."""
    with pytest.raises(TypeError):
        Animal("Generic", 1)  # type: ignore[abstract]
    with pytest.raises(TypeError):
        Organism()  # type: ignore[abstract]


@pytest.mark.parametrize("age", [0, 1, 7, 120])
def test_set_age_accepts_non_negative(age: int) -> None:
    """set_age applies non-negative ages and get returns them."""
    dog = Dog("Greyhound", 4)
    assert dog.set_age(age) is True
    assert dog.age == age


def test_set_age_rejects_negative_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    """Negative ages are ignored with a warning, not an error."""
    dog = Dog("Greyhound", 4)
    with caplog.at_level(logging.WARNING, logger="language_sampler"):
        assert dog.set_age(-3) is False
    assert dog.age == 4
    assert any("negative" in r.getMessage() for r in caplog.records)


def test_constructor_clamps_negative_age(caplog: pytest.LogCaptureFixture) -> None:
    """An animal is never built with a negative age."""
    with caplog.at_level(logging.WARNING, logger="language_sampler"):
        c = Canidae("Fox", -1)
    assert c.age == 0
    assert caplog.records


def test_is_valid_age() -> None:
    """Zero is valid; negatives are not."""
    assert is_valid_age(0)
    assert not is_valid_age(-1)


def test_respire_most_derived_override_wins(capsys: pytest.CaptureFixture[str]) -> None:
    """Dog.respire shadows Canidae.respire, which shadows Animal.respire."""
    canid = Canidae("General canidae", 10)
    dog = Dog("Greyhound", 4)
    assert canid.respire() == "Canidae is panting."
    assert dog.respire() == "Dog is panting."
    out = capsys.readouterr().out.splitlines()
    assert out == ["Canidae is panting.", "Dog is panting."]


def test_base_animal_respire_mentions_species(capsys: pytest.CaptureFixture[str]) -> None:
    """An animal without its own override uses the species in its line."""

    class Horse(Animal):
        def move(self) -> str:
            return self._report("Horse is galloping.")

    h = Horse("Mustang", 6)
    assert h.respire() == "Mustang is respiring."
    assert "Mustang" in capsys.readouterr().out


def test_dog_inherits_canidae_move(capsys: pytest.CaptureFixture[str]) -> None:
    """move is supplied by Canidae and inherited by Dog."""
    assert Dog("Beagle", 2).move() == "Canidae is moving."
    assert capsys.readouterr().out.strip() == "Canidae is moving."


def test_make_sound_and_str() -> None:
    """make_sound names the species; str shows species and age."""
    dog = Dog("Greyhound", 4)
    assert dog.make_sound() == "Greyhound is making a sound"
    assert str(dog) == "Species: Greyhound, Age: 4"


def test_animal_species_and_alive_default() -> None:
    """Animals are alive by default and can change species."""
    dog = Dog("Greyhound", 4)
    assert dog.is_alive is True
    dog.set_species("Whippet")
    assert dog.species == "Whippet"


def test_plant_behaviour(capsys: pytest.CaptureFixture[str]) -> None:
    """Plants respire through photosynthesis and grow."""
    rose = Plant("Rose", True)
    assert rose.respire() == "Rose is respiring through photosynthesis."
    assert rose.grow() == "Rose is growing."
    out = capsys.readouterr().out
    assert "Rose" in out


@pytest.mark.parametrize("flowering", [True, False])
def test_plant_alive_follows_flowering(flowering: bool) -> None:
    """Plant liveness is its flowering flag."""
    p = Plant("Tulip", flowering)
    assert p.is_alive is flowering
    assert p.is_flowering is flowering


def test_plant_age_and_species_are_fixed() -> None:
    """set_age and set_species never change a plant."""
    p = Plant("Fern", False)
    assert p.set_age(5) is False
    assert p.age == 0
    p.set_species("Moss")
    assert p.species == "Fern"


def test_every_organism_respires_without_raising() -> None:
    """Every organism answers respire and is_alive."""
    organisms: list[Organism] = [Canidae("Wolf", 3), Dog("Pug", 1), Plant("Oak", False)]
    for o in organisms:
        assert isinstance(o.respire(), str)
        assert isinstance(o.is_alive, bool)
