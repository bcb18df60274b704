"""Domain layer — layer model, predicates, and the core layer engines.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
