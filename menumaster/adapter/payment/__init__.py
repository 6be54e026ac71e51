"""Stripe payment adapter."""

from .client import (
    MockStripePaymentProvider,
    RealStripePaymentProvider,
    StripePaymentError,
    StripePaymentProvider,
)

__all__ = [
    "MockStripePaymentProvider",
    "RealStripePaymentProvider",
    "StripePaymentError",
    "StripePaymentProvider",
]
