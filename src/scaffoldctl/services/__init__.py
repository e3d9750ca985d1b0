"""Service layer: operations returning ServiceResult.

Services may import from domain, frameworks, and infrastructure layers.
They must never import from commands, output, or mcp.
"""
