from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence, Type, TypeVar

from QuantLib import DayCounter, IborIndex, Schedule

from couponlegs.cashflows.broadcast import broadcast
from couponlegs.cashflows.coupons import IndexedCoupon, ParCoupon, UpFrontIndexedCoupon
from couponlegs.cashflows.stubs import coupon_periods
from couponlegs.errors import LegConfigurationError
from couponlegs.settings import (
    DEFAULT_GEARING,
    DEFAULT_PAYMENT_ADJUSTMENT,
    DEFAULT_SPREAD,
    ENV_FLOATING_COUPON_KIND,
    floating_coupon_kind_name,
)

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=IndexedCoupon)


class FloatingCouponKind(Enum):
    """How the coupons of a floating leg resolve their index rate."""

    UP_FRONT = "upfront"
    PAR = "par"

    @property
    def coupon_type(self) -> Type[IndexedCoupon]:
        if self is FloatingCouponKind.UP_FRONT:
            return UpFrontIndexedCoupon
        return ParCoupon

    @classmethod
    def from_settings(cls) -> FloatingCouponKind:
        """Returns the kind configured through the environment."""
        name = floating_coupon_kind_name()
        try:
            return cls(name)
        except ValueError:
            raise LegConfigurationError(
                "unknown floating coupon kind",
                {ENV_FLOATING_COUPON_KIND: name},
            ) from None


def indexed_coupon_leg(
    coupon_type: Type[C],
    schedule: Schedule,
    nominals: Sequence[float],
    index: IborIndex,
    *,
    payment_adjustment: int = DEFAULT_PAYMENT_ADJUSTMENT,
    fixing_days: int | None = None,
    gearings: Sequence[float] = (),
    spreads: Sequence[float] = (),
    day_counter: DayCounter | None = None,
) -> list[C]:
    """
    Returns one `coupon_type` coupon per schedule period.

    Nominals, gearings and spreads are broadcast over the periods; gearings
    default to 1 and spreads to 0 when not given. `fixing_days` and
    `day_counter` default to those of `index`.
    """
    if len(nominals) == 0:
        raise LegConfigurationError("nominals not specified")

    if fixing_days is None:
        fixing_days = index.fixingDays()
    if day_counter is None:
        day_counter = index.dayCounter()

    calendar = schedule.calendar()
    leg: list[C] = []
    for period in coupon_periods(schedule):
        i = period.index
        leg.append(
            coupon_type(
                nominal=broadcast(nominals, i),
                payment_date=calendar.adjust(period.accrual_end, payment_adjustment),
                accrual_start=period.accrual_start,
                accrual_end=period.accrual_end,
                reference_start=period.reference_start,
                reference_end=period.reference_end,
                day_counter=day_counter,
                fixing_days=fixing_days,
                index=index,
                gearing=broadcast(gearings, i, DEFAULT_GEARING),
                spread=broadcast(spreads, i, DEFAULT_SPREAD),
            )
        )

    logger.debug(
        "built %s leg on %s with %d coupons", coupon_type.__name__, index.name(), len(leg)
    )
    return leg


def floating_rate_leg(
    schedule: Schedule,
    nominals: Sequence[float],
    index: IborIndex,
    *,
    payment_adjustment: int = DEFAULT_PAYMENT_ADJUSTMENT,
    fixing_days: int | None = None,
    gearings: Sequence[float] = (),
    spreads: Sequence[float] = (),
    day_counter: DayCounter | None = None,
    kind: FloatingCouponKind | None = None,
) -> list[IndexedCoupon]:
    """
    Returns a floating-rate leg on an Ibor-like index.

    `kind` selects the coupon representation; when omitted it is read from
    the ``COUPONLEGS_FLOATING_COUPON_KIND`` setting (par coupons by default).
    """
    if kind is None:
        kind = FloatingCouponKind.from_settings()
    return indexed_coupon_leg(
        kind.coupon_type,
        schedule,
        nominals,
        index,
        payment_adjustment=payment_adjustment,
        fixing_days=fixing_days,
        gearings=gearings,
        spreads=spreads,
        day_counter=day_counter,
    )


__all__ = ["FloatingCouponKind", "indexed_coupon_leg", "floating_rate_leg"]
