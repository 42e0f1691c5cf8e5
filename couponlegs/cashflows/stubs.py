"""Regular and irregular (stub) period handling for coupon legs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from QuantLib import Date, Schedule

from couponlegs.errors import LegConfigurationError


@dataclass(frozen=True, kw_only=True, slots=True)
class CouponPeriod:
    """
    Dates of a single schedule period as a coupon sees them.

    The accrual dates are always the schedule dates. The reference dates
    are what day counting and rate determination look at: they coincide with
    the accrual dates for a regular period, while for a stub the reference
    period is stretched or shrunk to one full schedule tenor

          reference_start      accrual_start            accrual_end
          |                    |  ...  short stub  ...  |
          |<------------------ one tenor -------------->|
    """

    index: int
    accrual_start: Date
    accrual_end: Date
    reference_start: Date
    reference_end: Date
    is_regular: bool


def first_period(schedule: Schedule) -> CouponPeriod:
    """Returns period 0, with a synthetic reference start if it is a stub."""
    dates = schedule.dates()
    start, end = dates[0], dates[1]
    if schedule.isRegular(1):
        return CouponPeriod(
            index=0,
            accrual_start=start,
            accrual_end=end,
            reference_start=start,
            reference_end=end,
            is_regular=True,
        )
    reference = schedule.calendar().adjust(
        end - schedule.tenor(), schedule.businessDayConvention()
    )
    return CouponPeriod(
        index=0,
        accrual_start=start,
        accrual_end=end,
        reference_start=reference,
        reference_end=end,
        is_regular=False,
    )


def last_period(schedule: Schedule) -> CouponPeriod:
    """Returns the final period, with a synthetic reference end if it is a stub."""
    dates = schedule.dates()
    n = len(dates)
    start, end = dates[n - 2], dates[n - 1]
    if schedule.isRegular(n - 1):
        return CouponPeriod(
            index=n - 2,
            accrual_start=start,
            accrual_end=end,
            reference_start=start,
            reference_end=end,
            is_regular=True,
        )
    reference = schedule.calendar().adjust(
        start + schedule.tenor(), schedule.businessDayConvention()
    )
    return CouponPeriod(
        index=n - 2,
        accrual_start=start,
        accrual_end=end,
        reference_start=start,
        reference_end=reference,
        is_regular=False,
    )


def coupon_periods(schedule: Schedule) -> Iterator[CouponPeriod]:
    """
    Yields the N-1 periods of a schedule with N dates, in order.

    Only the first and the last period can be stubs; interior periods are
    regular by construction and their reference period is the accrual period.
    With two dates the single period is classified as a first period.
    """
    dates = schedule.dates()
    n = len(dates)
    if n < 2:
        raise LegConfigurationError(
            "schedule must contain at least two dates", {"size": n}
        )

    yield first_period(schedule)
    for i in range(1, n - 2):
        yield CouponPeriod(
            index=i,
            accrual_start=dates[i],
            accrual_end=dates[i + 1],
            reference_start=dates[i],
            reference_end=dates[i + 1],
            is_regular=True,
        )
    if n > 2:
        yield last_period(schedule)


__all__ = ["CouponPeriod", "first_period", "last_period", "coupon_periods"]
