"""Domain layer — the task entity, status rules, and domain errors.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
