"""
jj-mcp: Jujutsu (jj) version-control operations exposed as MCP tools.
"""

__version__ = "1.0.0"
