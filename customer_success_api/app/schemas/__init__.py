"""
Pydantic schema definitions for API payloads.

Request bodies are validated against the ``*Create`` models; response
bodies are serialised from the read models using their camelCase
aliases so the dashboard receives ``healthScore`` and friends.
"""
