"""
MCP protocol support: the tool framework and the stdio server adapter.
"""
