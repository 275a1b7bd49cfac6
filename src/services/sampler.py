"""
Console entry point and showcase runner.

`main()` prints the greeting and the employees sorted by salary. `run_showcase()`
exercises every demo once and returns the results keyed by demo.
"""

from __future__ import annotations

import sys
from typing import Any

from src.domains.employees import (
    Employee,
    group_by_salary_bracket,
    length_of,
    names_starting_with,
    numbers_greater_than,
    reference_employees,
    reference_names,
    reference_numbers,
    salaries_of,
    sort_by_salary,
    uppercase,
)
from src.domains.organisms import Zoo
from src.services.demos import custom_exception_demo, index_error_demo
from src.utils.config import zoo_address, zoo_name
from src.utils.logger import get_logger, setup_from_config

GREETING = "Hello world!"

logger = get_logger()


def format_employee(employee: Employee) -> str:
    return f"Name: {employee.name} Salary: {employee.salary}"


def run_showcase(
    employees: list[Employee] | None = None,
    names: list[str] | None = None,
    numbers: list[int] | None = None,
    zoo: Zoo | None = None,
) -> dict[str, Any]:
    """
    Run every demo once and collect the results.

    Inputs default to the reference datasets and a zoo with the default
    exhibitions named from config.
    """
    employees = employees if employees is not None else reference_employees()
    names = names if names is not None else reference_names()
    numbers = numbers if numbers is not None else reference_numbers()
    zoo = zoo if zoo is not None else Zoo(zoo_name(), zoo_address())

    out: dict[str, Any] = {
        "names_starting_with_a": names_starting_with(names, "A"),
        "numbers_greater_than_50": numbers_greater_than(numbers, 50),
        "uppercase_names": uppercase(names),
        "name_lengths": length_of(names),
        "salaries": salaries_of(employees),
        "sorted_by_salary": sort_by_salary(employees),
        "salary_brackets": group_by_salary_bracket(employees),
        "zoo_noise": zoo.make_noise(),
        "zoo_respiration": zoo.respire(),
        "index_error": index_error_demo(),
        "custom_exception": custom_exception_demo(""),
    }
    logger.info("Showcase complete: %d employees, %d residents", len(employees), len(zoo.residents()))
    return out


def main() -> int:
    """Print the greeting and every reference employee in ascending salary order."""
    setup_from_config()
    print(GREETING)
    for employee in sort_by_salary(reference_employees()):
        print(format_employee(employee))
    return 0


if __name__ == "__main__":
    sys.exit(main())
