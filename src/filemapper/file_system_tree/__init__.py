"""Directory walking, path filtering and tree rendering.

This package holds the predicates that decide whether a single path survives,
the walk that applies them to a whole directory, and the builder that turns the
surviving paths into an indented tree.
"""
