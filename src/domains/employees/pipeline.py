"""
Query pipeline over names, numbers and employees.
Filters, maps, a stable salary sort, and grouping into salary brackets.

Every function takes its input explicitly, never mutates it, and returns a
new list (or dict of lists).
"""

from __future__ import annotations

from typing import Iterable

from src.domains.employees.employee import Employee

BELOW_60K = "Below 60,000"
FROM_60K_TO_100K = "60,000 - 100,000"
ABOVE_100K = "Above 100,000"

_LOWER_BOUND = 60000
_UPPER_BOUND = 100000


def names_starting_with(names: Iterable[str], prefix: str) -> list[str]:
    """Names that start with prefix (case-sensitive), in input order."""
    return [n for n in names if n.startswith(prefix)]


def numbers_greater_than(numbers: Iterable[int], threshold: int) -> list[int]:
    """Numbers strictly greater than threshold, in input order."""
    return [x for x in numbers if x > threshold]


def uppercase(names: Iterable[str]) -> list[str]:
    return [n.upper() for n in names]


def length_of(names: Iterable[str]) -> list[int]:
    return [len(n) for n in names]


def salaries_of(employees: Iterable[Employee]) -> list[int]:
    return [e.salary for e in employees]


def sort_by_salary(employees: Iterable[Employee]) -> list[Employee]:
    """Ascending by salary. Stable: equal salaries keep their input order."""
    return sorted(employees, key=lambda e: e.salary)


def salary_bracket(salary: int) -> str:
    """
    Label for a salary.

    Below 60,000 is exclusive; the middle bracket includes both 60,000 and
    100,000; anything above 100,000 goes to the top bracket.
    """
    if salary < _LOWER_BOUND:
        return BELOW_60K
    if salary <= _UPPER_BOUND:
        return FROM_60K_TO_100K
    return ABOVE_100K


def group_by_salary_bracket(employees: Iterable[Employee]) -> dict[str, list[Employee]]:
    """
    Partition employees by salary bracket.

    Brackets with no members are absent from the result. Keys appear in order
    of first occurrence and members keep input order.
    """
    groups: dict[str, list[Employee]] = {}
    for e in employees:
        groups.setdefault(salary_bracket(e.salary), []).append(e)
    return groups
