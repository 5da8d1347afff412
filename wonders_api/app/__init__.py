"""
Application package initializer.

The catalog is organised in layers: ``core`` holds configuration,
logging, errors and the in-memory store; ``schemas`` defines the wire
format; ``services`` holds the catalog and seeding logic; ``api``
exposes versioned routers.
"""

from .main import app  # noqa: F401
