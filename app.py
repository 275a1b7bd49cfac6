"""
Language Sampler: Streamlit explorer entry point.
"""

import streamlit as st

# Load .env first so logging and zoo settings come from it
from src.utils.config import load_config, zoo_address, zoo_name
load_config()

from src.domains.employees import (
    group_by_salary_bracket,
    names_starting_with,
    numbers_greater_than,
    reference_employees,
    reference_names,
    reference_numbers,
    sort_by_salary,
)
from src.domains.organisms import Zoo
from src.services.demos import custom_exception_demo, index_error_demo
from src.utils.logger import setup_from_config
from src.ui.sampler_display import render_employees, render_queries, render_zoo

log = setup_from_config()

st.set_page_config(page_title="Language Sampler", layout="wide")
st.title("Language Sampler")

employees = reference_employees()
names = reference_names()
numbers = reference_numbers()

with st.sidebar:
    st.header("Queries")
    prefix = st.text_input("Name prefix", value="A")
    threshold = int(st.number_input("Number threshold", value=50, step=1))
    st.caption(f"Names: {', '.join(names)}")
    st.caption(f"Numbers: {', '.join(str(n) for n in numbers)}")

col1, col2 = st.columns([1, 1])
with col1:
    render_employees(sort_by_salary(employees), group_by_salary_bracket(employees))
with col2:
    render_queries(
        prefix,
        names_starting_with(names, prefix),
        threshold,
        numbers_greater_than(numbers, threshold),
    )
    with st.expander("Error handling"):
        st.code(index_error_demo(), language="text")
        st.code(custom_exception_demo(""), language="text")

st.divider()
render_zoo(Zoo(zoo_name(), zoo_address()))
log.debug("Explorer rendered with prefix=%r threshold=%s", prefix, threshold)
