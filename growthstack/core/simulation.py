"""Month-by-month compounding simulation."""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from growthstack.models import (
    CalculationResult,
    CalculatorMode,
    CalculatorState,
    GoalAchievement,
    LumpsumInjection,
    MonthlyDataPoint,
    StepUpFrequency,
    YearlyResult,
)


class SimulationDomainError(ValueError):
    """Raised when the inputs fall outside the mathematical domain of the model."""


def index_injections(
    injections: Iterable[LumpsumInjection],
) -> Dict[Tuple[int, int], float]:
    """Return {(year, month): summed amount} so each month is a single lookup."""
    by_month: Dict[Tuple[int, int], float] = defaultdict(float)
    for injection in injections:
        by_month[(injection.year, injection.month)] += injection.amount
    return dict(by_month)


def month_position(month_index: int) -> Tuple[int, int]:
    """Map a 1-based global month index to (project year, month in year)."""
    return math.ceil(month_index / 12), ((month_index - 1) % 12) + 1


def _next_installment(state: CalculatorState, installment: float, month_index: int) -> float:
    if state.mode != CalculatorMode.STEP_UP or month_index <= 1:
        return installment
    if state.stepUpFrequency == StepUpFrequency.MONTHLY:
        return installment + state.stepUpAmount
    # yearly: first month of year 2, 3, ...
    if (month_index - 1) % 12 == 0:
        return installment + state.stepUpAmount
    return installment


def simulate(state: CalculatorState) -> CalculationResult:
    """
    Project the investment described by ``state``.

    Order of operations (per month):
      1) Apply any step-up to the recurring installment.
      2) Deposit installment + injections for this (year, month) at the START
         of the month (annuity due).
      3) Accrue one month of interest on the post-deposit balance.
      4) Deflate the balance by elapsed calendar time for the real value.
      5) Check the goal, record the month, and snapshot at year end.

    A non-positive duration simulates no months. Inflation at or below -100%
    raises SimulationDomainError.
    """
    annual_inflation = state.inflationRate / 100
    if annual_inflation <= -1:
        raise SimulationDomainError(
            f"inflationRate must be greater than -100%, got {state.inflationRate}%"
        )

    total_months = max(state.durationYears * 12, 0)
    monthly_rate = state.annualInterestRate / 12 / 100

    if state.mode == CalculatorMode.LUMPSUM:
        installment = 0.0
        balance = float(state.lumpsumInvestment)
        total_invested = float(state.lumpsumInvestment)
    else:
        installment = float(state.monthlyInvestment)
        balance = 0.0
        total_invested = 0.0

    extras = index_injections(state.additionalLumpsums)
    target = state.targetAmount
    goal: Optional[GoalAchievement] = None

    monthly: List[MonthlyDataPoint] = []
    yearly: List[YearlyResult] = []

    for m in range(1, total_months + 1):
        installment = _next_installment(state, installment, m)
        year, month = month_position(m)

        deposit = installment + extras.get((year, month), 0.0)

        after_deposit = balance + deposit
        interest = after_deposit * monthly_rate
        balance = after_deposit + interest

        total_invested += deposit

        real_value = balance / (1 + annual_inflation) ** (m / 12)

        # nominal comparison, first crossing only
        if target is not None and goal is None and balance >= target:
            goal = GoalAchievement(year=year, month=month)

        monthly.append(
            MonthlyDataPoint(
                monthIndex=m,
                year=year,
                invested=total_invested,
                value=balance,
                realValue=real_value,
                installment=installment,
            )
        )

        if m % 12 == 0 or m == total_months:
            yearly.append(
                YearlyResult(
                    year=year,
                    investedAmount=total_invested,
                    interestEarned=balance - total_invested,
                    totalValue=balance,
                    realValue=real_value,
                )
            )

    elapsed_years = total_months // 12
    total_real = balance / (1 + annual_inflation) ** elapsed_years

    return CalculationResult(
        totalInvested=total_invested,
        totalWealth=balance,
        totalRealWealth=total_real,
        totalGain=balance - total_invested,
        monthlyData=tuple(monthly),
        yearlyBreakdown=tuple(yearly),
        goalAchievedMonth=goal,
    )


__all__ = [
    "SimulationDomainError",
    "index_injections",
    "month_position",
    "simulate",
]
