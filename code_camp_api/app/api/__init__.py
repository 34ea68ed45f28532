"""
API package: routers, endpoint modules and request-scoped dependencies.
"""
