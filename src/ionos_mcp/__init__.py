"""MCP server for the IONOS DNS, Domains and SSL APIs."""

__version__ = "0.1.0"
