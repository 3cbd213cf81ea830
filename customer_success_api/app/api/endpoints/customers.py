"""
Customer endpoints.

Customers can be listed, created and fetched by id.  There are no
update or delete routes: a record keeps its name, email and health
score for the lifetime of the process.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from customer_success_api.app.api.deps import get_customer_service
from customer_success_api.app.schemas.customer import Customer, CustomerCreate
from customer_success_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=List[Customer])
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> List[Customer]:
    """Return every customer in the order they were created."""
    return await service.list_customers()


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    """Create a customer.

    The id and ``healthScore`` are generated by the server.  Posting
    the same body twice creates two separate customers.
    """
    return await service.create_customer(customer_in)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    """Retrieve a single customer.  Returns HTTP 404 if it does not exist."""
    customer = await service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer
