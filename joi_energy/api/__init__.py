"""
HTTP transport: FastAPI routers and dependency providers.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""
