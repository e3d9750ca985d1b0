"""Domain layer: requests, option resolution and the composition engine.

This layer depends only on stdlib, pydantic, and the shared template loader.
It must never import from services, commands, mcp, or config.
"""
