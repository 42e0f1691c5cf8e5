"""couponlegs public API."""

import logging

from .cashflows import (
    CmsCoupon,
    Coupon,
    FixedRateCoupon,
    FloatingCouponKind,
    IndexedCoupon,
    ParCoupon,
    UpFrontIndexedCoupon,
    bind_swaption_volatility,
    broadcast,
    check_leg,
    cms_in_arrears_leg,
    cms_leg,
    cms_zero_coupon_leg,
    fixed_rate_leg,
    floating_rate_leg,
    leg_to_frame,
)
from .errors import LegConfigurationError, LegError, LegInvariantError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "broadcast",
    "Coupon",
    "FixedRateCoupon",
    "IndexedCoupon",
    "UpFrontIndexedCoupon",
    "ParCoupon",
    "CmsCoupon",
    "fixed_rate_leg",
    "FloatingCouponKind",
    "floating_rate_leg",
    "cms_leg",
    "cms_zero_coupon_leg",
    "cms_in_arrears_leg",
    "bind_swaption_volatility",
    "check_leg",
    "leg_to_frame",
    "LegError",
    "LegConfigurationError",
    "LegInvariantError",
]
