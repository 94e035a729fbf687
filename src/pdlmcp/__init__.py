"""
pdlmcp - MCP tools for the People Data Labs v5 API.
"""
__version__ = "1.0.0"
