"""
MCP tools built on the Elasticsearch client.
"""
