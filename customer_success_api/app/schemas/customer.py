"""
Pydantic models for customer records.

``CustomerCreate`` is the request body accepted by ``POST /customers``.
Only ``name`` and ``email`` are read from the client; the identifier
and the health score are generated server side.  Both fields are stored
exactly as sent: a name only has to contain something other than
whitespace, and an email with surrounding whitespace is rejected rather
than trimmed.  ``Customer`` is the stored record and the response body
for every customer endpoint.

Email uniqueness is not checked anywhere: two customers may share an
address.
"""

import re

from pydantic import BaseModel, Field, field_validator

_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


class CustomerCreate(BaseModel):
    """Schema for creating a customer."""

    name: str = Field(..., examples=["Test Customer"])
    email: str = Field(..., examples=["test@example.com"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not _EMAIL_RE.fullmatch(v):
            raise ValueError("Email must look like name@domain.tld")
        return v


class Customer(BaseModel):
    """A stored customer record.

    ``health_score`` is serialised as ``healthScore``.  It is drawn
    uniformly from [0, 100) when the customer is created and never
    recomputed.
    """

    id: str
    name: str
    email: str
    health_score: float = Field(..., alias="healthScore", ge=0, lt=100)

    model_config = {
        "populate_by_name": True,
    }


class ChurnScore(BaseModel):
    """Output of the placeholder churn model for one customer.

    ``placeholder`` is always ``True``: the network behind this score
    has random weights and does not predict anything.
    """

    customer_id: str = Field(..., alias="customerId")
    churn_probability: float = Field(..., alias="churnProbability", gt=0, lt=1)
    placeholder: bool = True

    model_config = {
        "populate_by_name": True,
    }
