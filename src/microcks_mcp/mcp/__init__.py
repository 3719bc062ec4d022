"""MCP adapter — FastMCP server and tool registrations."""
