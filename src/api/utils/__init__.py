"""Utility modules for the API layer.

- **responses**: JSON response class rendered with orjson
"""
