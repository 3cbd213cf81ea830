"""
Application package.

Holds the FastAPI entrypoint (``main``) and its submodules: settings
and logging in ``core``, request and response models in ``schemas``,
domain logic in ``services`` and the HTTP routes in ``api``.
"""

from .main import app, create_app  # noqa: F401
