"""
chuk-mcp-scales - spelled scales, modes and arpeggios over MCP.

Derives correctly spelled note sequences from a root note and an interval
pattern, and serves a browsable library of them as MCP tools.
"""

__version__ = "0.1.0"
