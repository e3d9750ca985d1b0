"""MCP adapter exposing the scaffolding services as tools."""
