"""
Employee record and the reference datasets used by the query demos.

Each accessor builds a fresh list so callers never share mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    name: str
    salary: int


def reference_employees() -> list[Employee]:
    """The five-employee reference set."""
    return [
        Employee("John", 50000),
        Employee("Jane", 60000),
        Employee("Jake", 75000),
        Employee("Emily", 90000),
        Employee("Mike", 120000),
    ]


def reference_names() -> list[str]:
    return ["Alice", "Bob", "Charlie", "David", "Eve", "Frank", "Adam"]


def reference_numbers() -> list[int]:
    return [10, 25, 33, 47, 50, 68, 72, 89, 91]
