"""Domain layer — service summaries, result type, access errors.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, mcp, commands, or config.
"""
