"""Service layer: traversal algorithms, export, loading, and queries.

Algorithms depend only on the Backend contract, never on Graph internals.
Services must never import from commands or output.
"""
