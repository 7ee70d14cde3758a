"""Domain layer: transforms, result types, and the domain mutator.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
