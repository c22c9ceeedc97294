"""MCP tool catalog and server wiring."""
