from __future__ import annotations

import logging
from typing import Sequence

from QuantLib import DayCounter, Schedule

from couponlegs.cashflows.broadcast import broadcast
from couponlegs.cashflows.coupons import FixedRateCoupon
from couponlegs.cashflows.stubs import coupon_periods
from couponlegs.errors import LegConfigurationError
from couponlegs.settings import DEFAULT_PAYMENT_ADJUSTMENT

logger = logging.getLogger(__name__)


def fixed_rate_leg(
    schedule: Schedule,
    nominals: Sequence[float],
    rates: Sequence[float],
    day_counter: DayCounter,
    *,
    payment_adjustment: int = DEFAULT_PAYMENT_ADJUSTMENT,
    first_period_day_counter: DayCounter | None = None,
) -> list[FixedRateCoupon]:
    """
    Returns one fixed-rate coupon per schedule period.

    `nominals` and `rates` are broadcast over the periods: a vector shorter
    than the schedule keeps its last value for the remaining periods. Each
    payment date is the accrual end rolled with `payment_adjustment` on the
    schedule calendar.

    `first_period_day_counter` replaces `day_counter` on an irregular first
    period only; giving a different one for a regular first period is an
    error.
    """
    if len(rates) == 0:
        raise LegConfigurationError("coupon rates not specified")
    if len(nominals) == 0:
        raise LegConfigurationError("nominals not specified")

    calendar = schedule.calendar()
    leg: list[FixedRateCoupon] = []
    for period in coupon_periods(schedule):
        dc = day_counter
        if period.index == 0:
            dc = _first_period_day_counter(
                period.is_regular, day_counter, first_period_day_counter
            )
        leg.append(
            FixedRateCoupon(
                nominal=broadcast(nominals, period.index),
                payment_date=calendar.adjust(period.accrual_end, payment_adjustment),
                accrual_start=period.accrual_start,
                accrual_end=period.accrual_end,
                reference_start=period.reference_start,
                reference_end=period.reference_end,
                day_counter=dc,
                fixed_rate=broadcast(rates, period.index),
            )
        )

    logger.debug(
        "built fixed-rate leg with %d coupons (first regular=%s, last regular=%s)",
        len(leg),
        schedule.isRegular(1),
        schedule.isRegular(len(leg)),
    )
    return leg


def _first_period_day_counter(
    is_regular: bool,
    day_counter: DayCounter,
    override: DayCounter | None,
) -> DayCounter:
    if is_regular:
        if override is not None and override != day_counter:
            raise LegConfigurationError(
                "regular first coupon does not allow a first-period day count",
                {"day_counter": day_counter.name(), "override": override.name()},
            )
        if override is not None:
            logger.warning(
                "first-period day counter %s ignored on a regular first period",
                override.name(),
            )
        return day_counter
    return day_counter if override is None else override


__all__ = ["fixed_rate_leg"]
