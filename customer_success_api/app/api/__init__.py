"""
HTTP layer.

``router`` aggregates the per-domain routers found in ``endpoints``
and is mounted by ``main.create_app`` under ``settings.api_prefix``.
"""
