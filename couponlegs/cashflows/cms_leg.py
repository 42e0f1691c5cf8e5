"""
Constant-maturity-swap legs.

The three builders share one skeleton and differ only in when coupons pay
and when they fix:

    cms_leg                 pays at each period end, fixes at period start
    cms_zero_coupon_leg     pays everything on the final schedule date
    cms_in_arrears_leg      pays at each period end, fixes at period end

Every coupon of a leg holds the same `swaption_volatility` object, so that
relinking it (e.g. a QuantLib relinkable handle) is seen by the whole leg.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from QuantLib import DayCounter, Schedule

from couponlegs.cashflows.broadcast import broadcast
from couponlegs.cashflows.coupons import (
    CmsCoupon,
    CmsCouponPricer,
    FixedRateCoupon,
    LegCoupon,
    ParCoupon,
    UpFrontIndexedCoupon,
)
from couponlegs.cashflows.stubs import coupon_periods
from couponlegs.errors import LegConfigurationError, LegInvariantError
from couponlegs.settings import (
    DEFAULT_GEARING,
    DEFAULT_PAYMENT_ADJUSTMENT,
    DEFAULT_SPREAD,
)

logger = logging.getLogger(__name__)


def _build_cms_leg(
    schedule: Schedule,
    nominals: Sequence[float],
    swap_index: Any,
    fixing_days: int,
    day_counter: DayCounter,
    pricer: CmsCouponPricer,
    swaption_volatility: Any,
    *,
    payment_adjustment: int,
    gearings: Sequence[float],
    spreads: Sequence[float],
    caps: Sequence[float],
    floors: Sequence[float],
    mean_reversions: Sequence[float],
    zero_coupon: bool,
    in_arrears: bool,
) -> list[CmsCoupon]:
    if len(nominals) == 0:
        raise LegConfigurationError("no nominal given")

    calendar = schedule.calendar()
    final_payment_date = calendar.adjust(schedule.dates()[-1], payment_adjustment)

    leg: list[CmsCoupon] = []
    for period in coupon_periods(schedule):
        i = period.index
        if zero_coupon:
            payment_date = final_payment_date
        else:
            payment_date = calendar.adjust(period.accrual_end, payment_adjustment)
        leg.append(
            CmsCoupon(
                nominal=broadcast(nominals, i),
                payment_date=payment_date,
                accrual_start=period.accrual_start,
                accrual_end=period.accrual_end,
                reference_start=period.reference_start,
                reference_end=period.reference_end,
                day_counter=day_counter,
                swap_index=swap_index,
                fixing_days=fixing_days,
                pricer=pricer,
                gearing=broadcast(gearings, i, DEFAULT_GEARING),
                spread=broadcast(spreads, i, DEFAULT_SPREAD),
                # None stands for no cap, no floor and no mean reversion
                cap=broadcast(caps, i),
                floor=broadcast(floors, i),
                mean_reversion=broadcast(mean_reversions, i),
                is_in_arrears=in_arrears,
                swaption_volatility=swaption_volatility,
            )
        )

    logger.debug(
        "built CMS leg with %d coupons (zero coupon=%s, in arrears=%s)",
        len(leg),
        zero_coupon,
        in_arrears,
    )
    return leg


def cms_leg(
    schedule: Schedule,
    nominals: Sequence[float],
    swap_index: Any,
    settlement_days: int,
    day_counter: DayCounter,
    pricer: CmsCouponPricer,
    swaption_volatility: Any,
    *,
    payment_adjustment: int = DEFAULT_PAYMENT_ADJUSTMENT,
    gearings: Sequence[float] = (),
    spreads: Sequence[float] = (),
    caps: Sequence[float] = (),
    floors: Sequence[float] = (),
    mean_reversions: Sequence[float] = (),
) -> list[CmsCoupon]:
    """
    Returns a CMS leg paying at the end of each period.

    Nominals are required. Gearings default to 1 and spreads to 0; empty
    `caps`, `floors` and `mean_reversions` leave the coupons uncapped,
    unfloored and without mean reversion. Every vector is broadcast over the
    periods independently.
    """
    return _build_cms_leg(
        schedule,
        nominals,
        swap_index,
        settlement_days,
        day_counter,
        pricer,
        swaption_volatility,
        payment_adjustment=payment_adjustment,
        gearings=gearings,
        spreads=spreads,
        caps=caps,
        floors=floors,
        mean_reversions=mean_reversions,
        zero_coupon=False,
        in_arrears=False,
    )


def cms_zero_coupon_leg(
    schedule: Schedule,
    nominals: Sequence[float],
    swap_index: Any,
    fixing_days: int,
    day_counter: DayCounter,
    pricer: CmsCouponPricer,
    swaption_volatility: Any,
    *,
    payment_adjustment: int = DEFAULT_PAYMENT_ADJUSTMENT,
    gearings: Sequence[float] = (),
    spreads: Sequence[float] = (),
    caps: Sequence[float] = (),
    floors: Sequence[float] = (),
    mean_reversions: Sequence[float] = (),
) -> list[CmsCoupon]:
    """
    Returns a CMS leg whose coupons all pay on the last schedule date,
    rolled with `payment_adjustment`. Accrual and fixing dates are those of
    :func:`cms_leg`.
    """
    return _build_cms_leg(
        schedule,
        nominals,
        swap_index,
        fixing_days,
        day_counter,
        pricer,
        swaption_volatility,
        payment_adjustment=payment_adjustment,
        gearings=gearings,
        spreads=spreads,
        caps=caps,
        floors=floors,
        mean_reversions=mean_reversions,
        zero_coupon=True,
        in_arrears=False,
    )


def cms_in_arrears_leg(
    schedule: Schedule,
    nominals: Sequence[float],
    swap_index: Any,
    fixing_days: int,
    day_counter: DayCounter,
    pricer: CmsCouponPricer,
    swaption_volatility: Any,
    *,
    payment_adjustment: int = DEFAULT_PAYMENT_ADJUSTMENT,
    gearings: Sequence[float] = (),
    spreads: Sequence[float] = (),
    caps: Sequence[float] = (),
    floors: Sequence[float] = (),
    mean_reversions: Sequence[float] = (),
) -> list[CmsCoupon]:
    """Returns a CMS leg like :func:`cms_leg` whose coupons fix in arrears."""
    return _build_cms_leg(
        schedule,
        nominals,
        swap_index,
        fixing_days,
        day_counter,
        pricer,
        swaption_volatility,
        payment_adjustment=payment_adjustment,
        gearings=gearings,
        spreads=spreads,
        caps=caps,
        floors=floors,
        mean_reversions=mean_reversions,
        zero_coupon=False,
        in_arrears=True,
    )


def bind_swaption_volatility(leg: Sequence[LegCoupon], volatility: Any) -> None:
    """
    Points every coupon of a CMS leg to `volatility`.

    Only CMS coupons carry a volatility; any other coupon in the leg means the
    leg was not built by one of the CMS builders and the whole call fails
    before any coupon is touched.
    """
    coupons: list[CmsCoupon] = []
    for i, coupon in enumerate(leg):
        if isinstance(coupon, CmsCoupon):
            coupons.append(coupon)
        elif isinstance(coupon, (FixedRateCoupon, UpFrontIndexedCoupon, ParCoupon)):
            raise LegInvariantError(
                "cannot bind a swaption volatility to a non-CMS coupon",
                {"position": i, "coupon": type(coupon).__name__},
            )
        else:
            raise LegInvariantError(
                "unexpected element in coupon leg",
                {"position": i, "type": type(coupon).__name__},
            )

    for coupon in coupons:
        coupon.set_swaption_volatility(volatility)


__all__ = [
    "cms_leg",
    "cms_zero_coupon_leg",
    "cms_in_arrears_leg",
    "bind_swaption_volatility",
]
