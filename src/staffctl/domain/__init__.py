"""Domain layer — entities, the company aggregate, and its snapshot format.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
