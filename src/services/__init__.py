"""Application services layer (demos and the console entry point).

Services coordinate the domain modules and own stdout reporting. They should
avoid UI concerns.
"""
