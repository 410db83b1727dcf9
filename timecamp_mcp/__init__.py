"""TimeCamp time tracking exposed as MCP tools."""

__version__ = "1.0.0"
