from __future__ import annotations

from math import isclose

from growthstack.core.simulation import simulate
from growthstack.models import CalculatorMode, LumpsumInjection, StepUpFrequency


def test_zero_rate_wealth_equals_invested(make_state):
    """
    With no return, the balance is exactly the sum of what was put in.
    """
    state = make_state(
        mode=CalculatorMode.STEP_UP,
        monthlyInvestment=5000.0,
        stepUpAmount=250.0,
        stepUpFrequency=StepUpFrequency.YEARLY,
        durationYears=3,
        additionalLumpsums=[LumpsumInjection(id="a", year=2, month=7, amount=10000.0)],
    )

    result = simulate(state)

    assert result.totalWealth == result.totalInvested
    assert result.totalGain == 0.0
    for row in result.yearlyBreakdown:
        assert row.interestEarned == 0.0
        assert row.totalValue == row.investedAmount


def test_zero_rate_sip_accumulates_contributions_only(make_state):
    state = make_state(monthlyInvestment=5000.0, durationYears=3)

    result = simulate(state)

    expected = [60000.0, 120000.0, 180000.0]
    for row, total in zip(result.yearlyBreakdown, expected):
        assert isclose(row.totalValue, total, abs_tol=0.0)
    prev = 0.0
    for row in result.monthlyData:
        assert row.value >= prev, "balance should not shrink without withdrawals"
        prev = row.value
