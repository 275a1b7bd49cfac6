"""Employee records and the query pipeline over them."""

from src.domains.employees.employee import (
    Employee,
    reference_employees,
    reference_names,
    reference_numbers,
)
from src.domains.employees.pipeline import (
    ABOVE_100K,
    BELOW_60K,
    FROM_60K_TO_100K,
    group_by_salary_bracket,
    length_of,
    names_starting_with,
    numbers_greater_than,
    salaries_of,
    salary_bracket,
    sort_by_salary,
    uppercase,
)

__all__ = [
    "Employee",
    "reference_employees",
    "reference_names",
    "reference_numbers",
    "ABOVE_100K",
    "BELOW_60K",
    "FROM_60K_TO_100K",
    "group_by_salary_bracket",
    "length_of",
    "names_starting_with",
    "numbers_greater_than",
    "salaries_of",
    "salary_bracket",
    "sort_by_salary",
    "uppercase",
]
