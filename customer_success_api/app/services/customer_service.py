"""
Service layer for customers.

Customers live in a ``CustomerStore``: a plain in-memory list owned by
one application instance.  Records are only ever appended; nothing
updates or deletes them, and they are lost when the process exits.

All handlers run on a single event loop and none of the operations
below awaits anything, so each mutation completes within one handler
turn and no locking is needed.
"""

from __future__ import annotations

import logging
import random
import uuid
from typing import List, Optional

from customer_success_api.app.schemas.customer import Customer, CustomerCreate

logger = logging.getLogger(__name__)


class CustomerStore:
    """Insertion-ordered, append-only collection of customers."""

    def __init__(self) -> None:
        self._customers: List[Customer] = []

    def append(self, customer: Customer) -> None:
        """Add a record.  No duplicate check is performed."""
        self._customers.append(customer)

    def list(self) -> List[Customer]:
        """Return all records in insertion order.

        A new list is returned so callers cannot reorder or drop
        records held by the store.
        """
        return list(self._customers)

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Return the record with ``customer_id`` or ``None``."""
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def __len__(self) -> int:
        return len(self._customers)


class CustomerService:
    """Customer operations on top of a ``CustomerStore``."""

    def __init__(self, store: CustomerStore, rng: Optional[random.Random] = None) -> None:
        self.store = store
        self._rng = rng or random.Random()

    async def create_customer(self, data: CustomerCreate) -> Customer:
        """Create a customer with a fresh id and a random health score.

        The identifier is a UUID4 string.  The health score is drawn
        uniformly from [0, 100).  Identical payloads always produce
        distinct records.
        """
        customer = Customer(
            id=str(uuid.uuid4()),
            name=data.name,
            email=data.email,
            health_score=self._rng.random() * 100,
        )
        self.store.append(customer)
        logger.info("Created customer %s", customer.id)
        return customer

    async def list_customers(self) -> List[Customer]:
        return self.store.list()

    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.store.find_by_id(customer_id)
