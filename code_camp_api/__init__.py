"""
Top-level package for the Code Camp API.

All functionality lives in the ``app`` subpackage; build the ASGI
application with ``code_camp_api.app.create_app``.
"""

__all__ = []
