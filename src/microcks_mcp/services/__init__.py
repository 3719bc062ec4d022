"""Service layer — use cases returning Result.

Services may import from the domain layer and depend on ports.
They must never import from infrastructure, commands, output, or mcp.
"""
