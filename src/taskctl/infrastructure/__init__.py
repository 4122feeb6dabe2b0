"""Infrastructure layer — task persistence.

This layer depends on stdlib, pydantic, and the domain layer.
It must never import from services, commands, or output.
"""
