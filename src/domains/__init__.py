"""Domain layer (organism model, employee queries, domain errors).

Domain modules should not depend on UI. Sample data is passed into the query
functions rather than read from module state.
"""
