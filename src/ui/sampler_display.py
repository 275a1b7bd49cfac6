"""Streamlit UI helpers for the employee queries and the zoo.

Row builders are plain functions; `render_*` helpers take `st` so they can be
driven with a stand-in object.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from src.domains.employees import Employee
from src.domains.organisms import Animal, Organism, Plant, Zoo
from src.utils.logger import get_logger

logger = get_logger()


def employee_rows(employees: list[Employee]) -> list[dict[str, Any]]:
    """Table rows (name, salary) in the order given."""
    return [{"name": e.name, "salary": e.salary} for e in employees]


def bracket_rows(groups: dict[str, list[Employee]]) -> list[dict[str, Any]]:
    """One row per non-empty bracket: label, member count, member names."""
    return [
        {"bracket": label, "count": len(members), "employees": ", ".join(e.name for e in members)}
        for label, members in groups.items()
    ]


def _kind(o: Organism) -> str:
    if isinstance(o, Animal):
        return type(o).__name__
    if isinstance(o, Plant):
        return "Plant"
    return "Organism"


def organism_rows(zoo: Zoo) -> list[dict[str, Any]]:
    """One row per resident, with the exhibition it lives in."""
    rows: list[dict[str, Any]] = []
    for exhibition, members in zoo.exhibitions.items():
        for o in members:
            rows.append(
                {
                    "exhibition": exhibition,
                    "kind": _kind(o),
                    "species": o.species,
                    "age": o.age,
                    "alive": o.is_alive,
                }
            )
    return rows


def render_employees(employees: list[Employee], groups: dict[str, list[Employee]], st=st) -> None:
    """Render the salary-sorted table and the bracket summary."""
    st.subheader("Employees by salary")
    st.table(employee_rows(employees))
    st.subheader("Salary brackets")
    rows = bracket_rows(groups)
    if not rows:
        st.caption("No employees to group.")
        return
    st.table(rows)


def render_queries(
    prefix: str,
    matches: list[str],
    threshold: int,
    numbers: list[int],
    st=st,
) -> None:
    st.subheader("Queries")
    st.markdown(f"**Names starting with `{prefix}`:** {', '.join(matches) or '_none_'}")
    st.markdown(f"**Numbers greater than {threshold}:** {', '.join(str(n) for n in numbers) or '_none_'}")


def render_zoo(zoo: Zoo, st=st) -> None:
    """Render residents and what they do when the zoo wakes up."""
    st.subheader(f"{zoo.name}")
    st.caption(zoo.address)
    st.table(organism_rows(zoo))
    noise = zoo.make_noise()
    breath = [o.respire() for o in zoo.residents()]
    logger.debug("Rendered %d noise lines and %d respiration lines", len(noise), len(breath))
    st.markdown("**Noise**")
    for line in noise:
        st.markdown(f"- {line}")
    st.markdown("**Respiration**")
    for line in breath:
        st.markdown(f"- {line}")
