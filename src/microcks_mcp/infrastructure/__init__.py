"""Infrastructure layer — Microcks REST client and port adapters.

This layer depends on stdlib and third-party libs (httpx, pydantic).
Adapters implement the ports declared in the service layer and raise
domain errors; nothing here imports from mcp, commands, or output.
"""
