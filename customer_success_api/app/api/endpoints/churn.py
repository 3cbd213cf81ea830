"""
Churn score endpoint.

Exposes the output of the placeholder churn model for one customer.
The model is untrained, so the response always carries
``placeholder: true``; clients must not present the number as a
prediction.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from customer_success_api.app.api.deps import get_churn_model, get_customer_service
from customer_success_api.app.schemas.customer import ChurnScore
from customer_success_api.app.services.churn_service import ChurnModel, customer_features
from customer_success_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("/{customer_id}/churn", response_model=ChurnScore)
async def get_churn_score(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
    model: ChurnModel = Depends(get_churn_model),
) -> ChurnScore:
    customer = await service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    probability = model.predict(customer_features(customer))
    return ChurnScore(customer_id=customer.id, churn_probability=probability)
