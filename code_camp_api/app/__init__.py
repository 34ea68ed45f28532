"""
Application package.

``main`` builds the FastAPI app, ``api`` holds the routers, ``services``
the camp and speaker business rules, ``data`` the entities and SQLite
repository, ``schemas`` the transfer models and ``core`` configuration,
logging, security and database setup.
"""

from .main import create_app  # noqa: F401
