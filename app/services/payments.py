"""Payment provider integration (Stripe PaymentIntents)."""

from __future__ import annotations

import logging
from typing import Protocol

import stripe

from app.core.errors import ServerError

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def create_intent(self, amount: float) -> str: ...


def to_minor_units(amount: float) -> int:
    return int(round(amount * 100))


class StripePaymentGateway:
    def __init__(self, api_key: str, currency: str = "usd"):
        self.api_key = api_key
        self.currency = currency

    def create_intent(self, amount: float) -> str:
        """Create a card PaymentIntent and return its client secret."""
        try:
            intent = stripe.PaymentIntent.create(
                amount=to_minor_units(amount),
                currency=self.currency,
                payment_method_types=["card"],
                api_key=self.api_key,
            )
        except stripe.StripeError:
            logger.exception("Stripe PaymentIntent creation failed")
            raise ServerError("Payment provider error")
        return intent.client_secret
