"""
Top-level package for the Customer Success Platform API.

All functionality lives in the ``app`` subpackage, e.g.
``customer_success_api.app.main``.
"""

__all__ = []
