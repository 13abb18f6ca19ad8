"""Domain-level registries.

This package holds the status code registry, independent from how problems
are serialized or rendered by a web framework.
"""
