"""Package-wide defaults.

Values are plain module constants. The floating coupon kind can also be
picked through the ``COUPONLEGS_FLOATING_COUPON_KIND`` environment variable,
read each time a floating leg is built without an explicit ``kind``.
"""

from __future__ import annotations

import os

from QuantLib import Following

ENV_FLOATING_COUPON_KIND = "COUPONLEGS_FLOATING_COUPON_KIND"
ENV_LOG_LEVEL = "COUPONLEGS_LOG_LEVEL"

# Payment dates are rolled with this convention unless a builder is told otherwise
DEFAULT_PAYMENT_ADJUSTMENT = Following

DEFAULT_GEARING = 1.0
DEFAULT_SPREAD = 0.0

DEFAULT_FLOATING_COUPON_KIND = "par"
DEFAULT_LOG_LEVEL = "WARNING"


def floating_coupon_kind_name() -> str:
    """Name of the floating coupon kind configured in the environment."""
    return os.getenv(ENV_FLOATING_COUPON_KIND, DEFAULT_FLOATING_COUPON_KIND).lower()


__all__ = [
    "ENV_FLOATING_COUPON_KIND",
    "ENV_LOG_LEVEL",
    "DEFAULT_PAYMENT_ADJUSTMENT",
    "DEFAULT_GEARING",
    "DEFAULT_SPREAD",
    "DEFAULT_FLOATING_COUPON_KIND",
    "DEFAULT_LOG_LEVEL",
    "floating_coupon_kind_name",
]
