"""
Tests for Zoo: default residents, noise, respiration.
"""

from __future__ import annotations

import pytest

from src.domains.organisms import Canidae, Dog, Plant, Zoo, default_exhibitions


def test_default_residents() -> None:
    """A zoo without exhibitions gets a canid, a dog and a rose."""
    zoo = Zoo("City Zoo", "1 Park Lane")
    residents = zoo.residents()
    assert [type(o) for o in residents] == [Canidae, Dog, Plant]
    assert [o.species for o in residents] == ["General canidae", "Greyhound", "Rose"]


def test_make_noise(capsys: pytest.CaptureFixture[str]) -> None:
    """Only animals make noise."""
    zoo = Zoo("City Zoo", "1 Park Lane")
    assert zoo.make_noise() == [
        "General canidae is making a sound",
        "Greyhound is making a sound",
    ]
    assert capsys.readouterr().out.count("making a sound") == 2


def test_respire_uses_plants() -> None:
    """Only plants respire through the zoo."""
    zoo = Zoo("City Zoo", "1 Park Lane")
    assert zoo.respire() == ["Rose is respiring through photosynthesis."]


def test_custom_exhibitions() -> None:
    """Exhibitions passed in are used as-is."""
    zoo = Zoo("Small Zoo", "2 Elm Road", {"Kennel": [Dog("Pug", 2)]})
    assert zoo.name == "Small Zoo"
    assert zoo.address == "2 Elm Road"
    assert zoo.respire() == []
    assert zoo.make_noise() == ["Pug is making a sound"]


def test_empty_exhibitions_are_kept() -> None:
    """An explicit empty mapping is not replaced by the defaults."""
    zoo = Zoo("Empty", "Nowhere", {})
    assert zoo.residents() == []


def test_default_exhibitions_are_fresh() -> None:
    """Each call builds new residents."""
    a = default_exhibitions()
    b = default_exhibitions()
    assert a["Canids"][0] is not b["Canids"][0]
