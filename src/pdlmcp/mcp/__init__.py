"""
JSON-RPC 2.0 front-end for MCP over HTTP.
"""
