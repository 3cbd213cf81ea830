"""
Placeholder churn model.

``ChurnModel`` is a two-layer dense network (4 inputs, 10 ReLU units,
one sigmoid output) implemented with numpy.  The application creates
it with random weights and never trains it, so its scores are NOT
churn predictions.  Every API response carrying one is flagged with
``placeholder: true``.

``train`` runs full-batch gradient descent on binary cross-entropy and
is kept so the network can be fitted once real labelled data exists.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from customer_success_api.app.schemas.customer import Customer

logger = logging.getLogger(__name__)

INPUT_UNITS = 4
HIDDEN_UNITS = 10

# Keeps sigmoid outputs strictly inside (0, 1) and log() finite.
_EPS = 1e-7


def customer_features(customer: Customer) -> List[float]:
    """Map a customer to the model's four input features."""
    return [
        customer.health_score / 100.0,
        len(customer.name) / 100.0,
        len(customer.email) / 100.0,
        1.0,
    ]


def _sigmoid(z: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-z))


class ChurnModel:
    """Sequential dense network with random initial weights."""

    def __init__(
        self,
        w1: np.ndarray,
        b1: np.ndarray,
        w2: np.ndarray,
        b2: np.ndarray,
    ) -> None:
        self.w1 = w1
        self.b1 = b1
        self.w2 = w2
        self.b2 = b2

    @classmethod
    def create(cls, seed: Optional[int] = None) -> "ChurnModel":
        """Build a network with Glorot-uniform weights and zero biases."""
        rng = np.random.default_rng(seed)
        limit1 = np.sqrt(6.0 / (INPUT_UNITS + HIDDEN_UNITS))
        limit2 = np.sqrt(6.0 / (HIDDEN_UNITS + 1))
        return cls(
            w1=rng.uniform(-limit1, limit1, size=(INPUT_UNITS, HIDDEN_UNITS)),
            b1=np.zeros(HIDDEN_UNITS),
            w2=rng.uniform(-limit2, limit2, size=(HIDDEN_UNITS, 1)),
            b2=np.zeros(1),
        )

    def _forward(self, x: np.ndarray):
        z1 = x @ self.w1 + self.b1
        a1 = np.maximum(z1, 0.0)
        out = _sigmoid(a1 @ self.w2 + self.b2)
        return z1, a1, np.clip(out, _EPS, 1.0 - _EPS)

    def train(
        self,
        data: Sequence[Sequence[float]],
        labels: Sequence[float],
        epochs: int = 100,
        learning_rate: float = 0.01,
    ) -> List[float]:
        """Fit the network and return the loss recorded at each epoch.

        Raises ``ValueError`` when ``data`` is not an (n, 4) matrix or
        ``labels`` does not hold exactly n values.
        """
        x = np.asarray(data, dtype=float)
        y = np.asarray(labels, dtype=float).reshape(-1, 1)
        if x.ndim != 2 or x.shape[1] != INPUT_UNITS:
            raise ValueError(f"Training data must have shape (n, {INPUT_UNITS}), got {x.shape}")
        if y.shape[0] != x.shape[0]:
            raise ValueError(f"Expected {x.shape[0]} labels, got {y.shape[0]}")

        n = x.shape[0]
        losses: List[float] = []
        for _ in range(epochs):
            z1, a1, out = self._forward(x)
            loss = -np.mean(y * np.log(out) + (1.0 - y) * np.log(1.0 - out))
            losses.append(float(loss))

            # Sigmoid + binary cross-entropy gradient w.r.t. the logit.
            d_logit = (out - y) / n
            grad_w2 = a1.T @ d_logit
            grad_b2 = d_logit.sum(axis=0)
            d_hidden = (d_logit @ self.w2.T) * (z1 > 0)
            grad_w1 = x.T @ d_hidden
            grad_b1 = d_hidden.sum(axis=0)

            self.w2 -= learning_rate * grad_w2
            self.b2 -= learning_rate * grad_b2
            self.w1 -= learning_rate * grad_w1
            self.b1 -= learning_rate * grad_b1

        if losses:
            logger.info("Trained churn model for %d epochs, final loss %.4f", epochs, losses[-1])
        return losses

    def predict(self, features: Sequence[float]) -> float:
        """Return the network output for one feature vector."""
        x = np.asarray(features, dtype=float)
        if x.shape != (INPUT_UNITS,):
            raise ValueError(f"Expected {INPUT_UNITS} features, got shape {x.shape}")
        _, _, out = self._forward(x.reshape(1, -1))
        return float(out[0, 0])
