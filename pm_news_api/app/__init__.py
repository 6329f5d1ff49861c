"""
Application package initializer.

The project is organised into a few logical pieces: ``core`` holds
configuration, logging and the in‑memory store, ``schemas`` the
Pydantic models, ``services`` logic layered on top of the store and
``api/<version>/`` the HTTP routers.
"""

from .main import app  # noqa: F401
