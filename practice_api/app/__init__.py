"""
Application package.

``main`` builds the FastAPI app; ``api`` holds the routers, ``services``
the query and simulated-write logic, ``schemas`` the pydantic models,
``core`` configuration, logging, errors and the filter engine, and
``data`` the raw practice datasets.
"""

from .main import app  # noqa: F401
