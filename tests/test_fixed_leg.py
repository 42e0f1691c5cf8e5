import dataclasses

import QuantLib as ql
import pytest

from couponlegs.cashflows.coupons import FixedRateCoupon
from couponlegs.cashflows.fixed_leg import fixed_rate_leg
from couponlegs.cashflows.leg import check_leg
from couponlegs.errors import LegConfigurationError

TENOR = ql.Period(3, ql.Months)


def _schedule(start, end, rule=ql.DateGeneration.Forward, calendar=None):
    return ql.Schedule(
        start,
        end,
        TENOR,
        calendar or ql.NullCalendar(),
        ql.Unadjusted,
        ql.Unadjusted,
        rule,
        False,
    )


def test_regular_leg() -> None:
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(1, 10, 2020))
    leg = fixed_rate_leg(sch, [100.0], [0.05], ql.Actual365Fixed())

    assert len(leg) == 3
    check_leg(leg, sch)
    expected = [
        (ql.Date(1, 1, 2020), ql.Date(1, 4, 2020)),
        (ql.Date(1, 4, 2020), ql.Date(1, 7, 2020)),
        (ql.Date(1, 7, 2020), ql.Date(1, 10, 2020)),
    ]
    for c, (start, end) in zip(leg, expected):
        assert isinstance(c, FixedRateCoupon)
        assert c.nominal == 100.0
        assert c.rate() == 0.05
        assert (c.accrual_start, c.accrual_end) == (start, end)
        assert (c.reference_start, c.reference_end) == (start, end)
        assert c.payment_date == end


def test_amount_uses_accrual_period() -> None:
    dc = ql.Actual365Fixed()
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(1, 7, 2020))
    leg = fixed_rate_leg(sch, [1_000_000.0], [0.04], dc)

    c = leg[0]
    assert c.accrual_days() == 91
    assert c.accrual_period() == pytest.approx(91 / 365)
    assert c.amount() == pytest.approx(1_000_000.0 * 0.04 * 91 / 365)


def test_vectors_are_broadcast() -> None:
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(1, 1, 2021))
    leg = fixed_rate_leg(sch, [100.0, 75.0], [0.01, 0.02, 0.03], ql.Actual360())

    assert [c.nominal for c in leg] == [100.0, 75.0, 75.0, 75.0]
    assert [c.rate() for c in leg] == [0.01, 0.02, 0.03, 0.03]


def test_payment_dates_are_adjusted() -> None:
    calendar = ql.TARGET()
    sch = _schedule(ql.Date(1, 2, 2020), ql.Date(1, 8, 2020), calendar=calendar)
    leg = fixed_rate_leg(
        sch, [100.0], [0.05], ql.Actual360(), payment_adjustment=ql.Following
    )

    # 1 May is a TARGET holiday, 1 August 2020 a Saturday
    assert [c.payment_date for c in leg] == [ql.Date(4, 5, 2020), ql.Date(3, 8, 2020)]
    assert [c.accrual_end for c in leg] == [ql.Date(1, 5, 2020), ql.Date(1, 8, 2020)]


def test_short_first_period_uses_reference_period() -> None:
    dc = ql.ActualActual(ql.ActualActual.ISMA)
    sch = _schedule(
        ql.Date(15, 1, 2020), ql.Date(1, 10, 2020), rule=ql.DateGeneration.Backward
    )
    leg = fixed_rate_leg(sch, [100.0], [0.05], dc)

    first = leg[0]
    assert first.accrual_start == ql.Date(15, 1, 2020)
    assert first.reference_start == ql.Date(1, 1, 2020)
    assert first.reference_end == ql.Date(1, 4, 2020)
    assert first.accrual_period() == pytest.approx(0.25 * 77 / 91)
    assert first.day_counter == dc
    check_leg(leg, sch)


def test_short_last_period_uses_reference_period() -> None:
    dc = ql.ActualActual(ql.ActualActual.ISMA)
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(15, 11, 2020))
    leg = fixed_rate_leg(sch, [100.0], [0.05], dc)

    last = leg[-1]
    assert last.accrual_end == ql.Date(15, 11, 2020)
    assert last.reference_start == ql.Date(1, 10, 2020)
    assert last.reference_end == ql.Date(1, 1, 2021)
    assert last.accrual_period() == pytest.approx(0.25 * 45 / 92)
    for c in leg[:-1]:
        assert c.accrual_period() == pytest.approx(0.25)


def test_first_period_day_counter_on_stub() -> None:
    sch = _schedule(
        ql.Date(15, 1, 2020), ql.Date(1, 10, 2020), rule=ql.DateGeneration.Backward
    )
    leg = fixed_rate_leg(
        sch,
        [100.0],
        [0.05],
        ql.Actual365Fixed(),
        first_period_day_counter=ql.Actual360(),
    )

    assert leg[0].day_counter == ql.Actual360()
    assert all(c.day_counter == ql.Actual365Fixed() for c in leg[1:])


def test_first_period_day_counter_rejected_on_regular_period() -> None:
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(1, 10, 2020))
    with pytest.raises(LegConfigurationError):
        fixed_rate_leg(
            sch,
            [100.0],
            [0.05],
            ql.Actual365Fixed(),
            first_period_day_counter=ql.Actual360(),
        )


def test_same_first_period_day_counter_accepted_on_regular_period() -> None:
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(1, 10, 2020))
    leg = fixed_rate_leg(
        sch,
        [100.0],
        [0.05],
        ql.Actual365Fixed(),
        first_period_day_counter=ql.Actual365Fixed(),
    )
    assert len(leg) == 3


@pytest.mark.parametrize("nominals, rates", [([], [0.05]), ([100.0], [])])
def test_empty_vectors_are_rejected(nominals, rates) -> None:
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(1, 10, 2020))
    with pytest.raises(LegConfigurationError):
        fixed_rate_leg(sch, nominals, rates, ql.Actual365Fixed())


def test_coupons_are_immutable() -> None:
    sch = _schedule(ql.Date(1, 1, 2020), ql.Date(1, 4, 2020))
    (c,) = fixed_rate_leg(sch, [100.0], [0.05], ql.Actual365Fixed())
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.nominal = 200.0
