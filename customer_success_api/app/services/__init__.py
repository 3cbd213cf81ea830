"""
Service layer abstraction.

Each service encapsulates the logic for a domain.  Handlers receive
services through FastAPI dependencies, so the in-memory store used
here can later be replaced by a persistent one without touching the
API handlers.
"""
