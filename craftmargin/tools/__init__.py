# craftmargin/tools/__init__.py
"""
Tool implementations shared by the CLI and the MCP server.

Each tool returns a plain dict with a ``success`` flag and never raises.
"""
