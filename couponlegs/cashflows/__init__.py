"""Coupon leg builders."""

from .broadcast import broadcast
from .cms_leg import (
    bind_swaption_volatility,
    cms_in_arrears_leg,
    cms_leg,
    cms_zero_coupon_leg,
)
from .coupons import (
    CmsCoupon,
    CmsCouponPricer,
    Coupon,
    FixedRateCoupon,
    IndexedCoupon,
    LegCoupon,
    ParCoupon,
    UpFrontIndexedCoupon,
)
from .fixed_leg import fixed_rate_leg
from .floating_leg import FloatingCouponKind, floating_rate_leg, indexed_coupon_leg
from .leg import check_leg, debug, leg_to_frame
from .stubs import CouponPeriod, coupon_periods, first_period, last_period

__all__ = [
    "broadcast",
    "CouponPeriod",
    "coupon_periods",
    "first_period",
    "last_period",
    "Coupon",
    "FixedRateCoupon",
    "IndexedCoupon",
    "UpFrontIndexedCoupon",
    "ParCoupon",
    "CmsCoupon",
    "CmsCouponPricer",
    "LegCoupon",
    "fixed_rate_leg",
    "FloatingCouponKind",
    "indexed_coupon_leg",
    "floating_rate_leg",
    "cms_leg",
    "cms_zero_coupon_leg",
    "cms_in_arrears_leg",
    "bind_swaption_volatility",
    "check_leg",
    "leg_to_frame",
    "debug",
]
