"""Domain layer — model tree, command sets, matching and merge rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, or config.
"""
