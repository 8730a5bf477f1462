"""Infrastructure layer: the backend contract and in-memory storage.

This layer depends on the domain layer only.
It must never import from services, commands, or output.
"""
