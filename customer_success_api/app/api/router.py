"""
Top-level API router.

Aggregates the domain routers under a single prefix.  When new
endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import customers, churn

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
# Churn scores hang off a single customer, so they share the prefix.
router.include_router(churn.router, prefix="/customers", tags=["churn"])
