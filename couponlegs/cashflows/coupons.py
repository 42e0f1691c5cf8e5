"""Coupon value types produced by the leg builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Protocol, Union

from QuantLib import Date, Days, DayCounter, IborIndex, Preceding

from couponlegs.settings import DEFAULT_GEARING, DEFAULT_SPREAD


@dataclass(frozen=True, kw_only=True)
class Coupon(ABC):
    """
    Common fields of a coupon paid on a single schedule period.

    `reference_start` and `reference_end` delimit the period the day counter
    uses as reference when computing the accrual fraction. They equal the
    accrual dates unless the coupon pays a first or last stub.
    """

    nominal: float
    payment_date: Date
    accrual_start: Date
    accrual_end: Date
    reference_start: Date
    reference_end: Date
    day_counter: DayCounter

    def date(self) -> Date:
        return self.payment_date

    def accrual_period(self) -> float:
        """Year fraction of the accrual period, measured against the reference period."""
        return self.day_counter.yearFraction(
            self.accrual_start,
            self.accrual_end,
            self.reference_start,
            self.reference_end,
        )

    def accrual_days(self) -> int:
        return self.day_counter.dayCount(self.accrual_start, self.accrual_end)

    @abstractmethod
    def rate(self) -> float:
        """Annualised rate paid over the accrual period."""

    def amount(self) -> float:
        return self.nominal * self.rate() * self.accrual_period()


@dataclass(frozen=True, kw_only=True)
class FixedRateCoupon(Coupon):
    """Coupon paying a fixed rate on its nominal."""

    fixed_rate: float

    def rate(self) -> float:
        return self.fixed_rate


@dataclass(frozen=True, kw_only=True)
class IndexedCoupon(Coupon):
    """
    Coupon paying `gearing * fixing + spread`, where the fixing is taken on
    an Ibor-like index `fixing_days` business days before accrual start.

    Concrete subclasses decide how the index fixing is obtained.
    """

    fixing_days: int
    index: IborIndex
    gearing: float = DEFAULT_GEARING
    spread: float = DEFAULT_SPREAD

    def fixing_date(self) -> Date:
        return self.index.fixingCalendar().advance(
            self.accrual_start, -self.fixing_days, Days, Preceding
        )

    @abstractmethod
    def index_fixing(self) -> float:
        """Index rate the coupon is indexed to."""

    def rate(self) -> float:
        return self.gearing * self.index_fixing() + self.spread


@dataclass(frozen=True, kw_only=True)
class UpFrontIndexedCoupon(IndexedCoupon):
    """Indexed coupon whose rate is the index fixing observed on the fixing date."""

    def index_fixing(self) -> float:
        return self.index.fixing(self.fixing_date())


@dataclass(frozen=True, kw_only=True)
class ParCoupon(IndexedCoupon):
    """
    Indexed coupon whose rate is the par rate over its own accrual period,
    implied by the index forwarding curve

        fixing = (P(accrual_start) / P(accrual_end) - 1) / tau(accrual_start, accrual_end)

    with `tau` measured with the index day counter.
    """

    def index_fixing(self) -> float:
        curve = self.index.forwardingTermStructure()
        try:
            start_df = curve.discount(self.accrual_start)
            end_df = curve.discount(self.accrual_end)
        except RuntimeError as exc:
            # raised by QuantLib for an unlinked handle or dates before the curve
            raise ValueError(
                f"index {self.index.name()} cannot forecast {self.accrual_start.ISO()}: {exc}"
            ) from exc
        tau = self.index.dayCounter().yearFraction(self.accrual_start, self.accrual_end)
        return (start_df / end_df - 1.0) / tau


class CmsCouponPricer(Protocol):
    """Anything able to price the swaplet rate of a CMS coupon."""

    def swaplet_rate(self, coupon: CmsCoupon) -> float:
        ...


@dataclass(frozen=True, kw_only=True, eq=False)
class CmsCoupon(Coupon):
    """
    Coupon indexed to a constant-maturity swap rate.

    `cap`, `floor` and `mean_reversion` are None when not given. The coupon
    fixes `fixing_days` business days before accrual start, or before accrual
    end when `is_in_arrears` is set.

    `swaption_volatility` is the market-data context used by the pricer for
    the convexity adjustment. It is shared by reference among the coupons of
    a leg and is the only attribute that can change after construction, see
    `set_swaption_volatility`.
    """

    swap_index: Any
    fixing_days: int
    pricer: CmsCouponPricer
    gearing: float = DEFAULT_GEARING
    spread: float = DEFAULT_SPREAD
    cap: float | None = None
    floor: float | None = None
    mean_reversion: float | None = None
    is_in_arrears: bool = False
    swaption_volatility: Any = field(default=None, repr=False, compare=False)

    def fixing_date(self) -> Date:
        base = self.accrual_end if self.is_in_arrears else self.accrual_start
        return self.swap_index.fixingCalendar().advance(
            base, -self.fixing_days, Days, Preceding
        )

    def is_capped(self) -> bool:
        return self.cap is not None

    def is_floored(self) -> bool:
        return self.floor is not None

    def set_swaption_volatility(self, volatility: Any) -> None:
        object.__setattr__(self, "swaption_volatility", volatility)

    def rate(self) -> float:
        return self.pricer.swaplet_rate(self)

    # compared by identity, the volatility binding can change
    __eq__ = object.__eq__
    __hash__ = object.__hash__


# Closed set of coupons a leg can hold
LegCoupon = Union[FixedRateCoupon, UpFrontIndexedCoupon, ParCoupon, CmsCoupon]


__all__ = [
    "Coupon",
    "FixedRateCoupon",
    "IndexedCoupon",
    "UpFrontIndexedCoupon",
    "ParCoupon",
    "CmsCouponPricer",
    "CmsCoupon",
    "LegCoupon",
]
