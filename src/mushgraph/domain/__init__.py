"""Domain layer: identities, node and edge value types, failure taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from infrastructure, services, commands, or config.
"""
