"""
HTTP API layer.

FastAPI application, routers and dependency wiring.
"""
