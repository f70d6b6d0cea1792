"""
Application package initializer.

``core`` holds configuration, logging, errors and shared state,
``schemas`` the pydantic models, ``services`` the in-memory address
book logic and ``api`` the versioned HTTP routes assembled in
``main``.
"""

from .main import app  # noqa: F401
