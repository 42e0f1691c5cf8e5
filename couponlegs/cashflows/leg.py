"""Inspection helpers for built legs."""

from __future__ import annotations

from typing import Any, Sequence

from pandas import DataFrame, option_context
from QuantLib import Schedule

from couponlegs.cashflows.coupons import (
    CmsCoupon,
    Coupon,
    FixedRateCoupon,
    IndexedCoupon,
)
from couponlegs.errors import LegInvariantError

_COLUMNS = (
    "Date",
    "Nominal",
    "AccrualStartDate",
    "AccrualEndDate",
    "ReferenceStartDate",
    "ReferenceEndDate",
    "AccrualDays",
    "AccrualPeriod",
)


def check_leg(leg: Sequence[Coupon], schedule: Schedule) -> None:
    """
    Verifies that `leg` covers `schedule` period by period.

    A leg built on a schedule with N dates holds N-1 coupons whose accrual
    periods are the schedule periods, in order, without gaps or overlaps.
    """
    dates = schedule.dates()
    if len(leg) != len(dates) - 1:
        raise LegInvariantError(
            "leg does not have one coupon per schedule period",
            {"coupons": len(leg), "periods": len(dates) - 1},
        )
    for i, coupon in enumerate(leg):
        if coupon.accrual_start != dates[i] or coupon.accrual_end != dates[i + 1]:
            raise LegInvariantError(
                "coupon accrual period differs from schedule period",
                {"position": i, "accrual_start": coupon.accrual_start.ISO()},
            )
        if i > 0 and leg[i - 1].accrual_end != coupon.accrual_start:
            raise LegInvariantError(
                "adjacent coupons are not contiguous", {"position": i}
            )


def _row(coupon: Coupon) -> dict[str, Any]:
    row: dict[str, Any] = {
        "Date": coupon.date().ISO(),
        "Nominal": coupon.nominal,
        "AccrualStartDate": coupon.accrual_start.ISO(),
        "AccrualEndDate": coupon.accrual_end.ISO(),
        "ReferenceStartDate": coupon.reference_start.ISO(),
        "ReferenceEndDate": coupon.reference_end.ISO(),
        "AccrualDays": coupon.accrual_days(),
        "AccrualPeriod": coupon.accrual_period(),
    }
    if isinstance(coupon, FixedRateCoupon):
        row["Rate"] = coupon.fixed_rate
    elif isinstance(coupon, IndexedCoupon):
        row.update(
            Gearing=coupon.gearing,
            Spread=coupon.spread,
            FixingDays=coupon.fixing_days,
        )
    elif isinstance(coupon, CmsCoupon):
        row.update(
            Gearing=coupon.gearing,
            Spread=coupon.spread,
            Cap=coupon.cap,
            Floor=coupon.floor,
            InArrears=coupon.is_in_arrears,
        )
    return row


def leg_to_frame(leg: Sequence[Coupon]) -> DataFrame:
    """
    Returns the coupons of a leg as a table indexed by payment date.

    Only contractual data is shown; rates of floating and CMS coupons are not
    forecast, which keeps this usable on legs without market data attached.
    """
    if len(leg) == 0:
        return DataFrame(columns=list(_COLUMNS)).set_index("Date")
    return DataFrame(data=(_row(c) for c in leg)).set_index("Date")


def debug(leg: Sequence[Coupon]) -> None:
    """Display detailed information about the coupons of a leg."""
    df = leg_to_frame(leg).round({"Nominal": 2, "AccrualPeriod": 6})
    with option_context("display.float_format", "{:,.2f}".format):
        if "Rate" in df:
            df["Rate"] = df.Rate.map("{:,.6f}".format)
        if "Spread" in df:
            df["Spread"] = df.Spread.map("{:,.6f}".format)
        df["AccrualPeriod"] = df.AccrualPeriod.map("{:,.6f}".format)
        print(df)


__all__ = ["check_leg", "leg_to_frame", "debug"]
