"""
FastAPI dependencies shared by the endpoint modules.

The customer service and the churn model are created once
per application in ``create_app`` and kept on ``app.state``.  Handlers
reach them only through these functions, which lets tests build an
app around their own store.
"""

from fastapi import Request

from customer_success_api.app.services.churn_service import ChurnModel
from customer_success_api.app.services.customer_service import CustomerService


def get_customer_service(request: Request) -> CustomerService:
    return request.app.state.customer_service


def get_churn_model(request: Request) -> ChurnModel:
    return request.app.state.churn_model
