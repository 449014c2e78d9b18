from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CalculatorMode(str, Enum):
    SIP = "SIP"
    LUMPSUM = "LUMPSUM"
    STEP_UP = "STEP_UP"


class StepUpFrequency(str, Enum):
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class LumpsumInjection(BaseModel):
    """One-off extra contribution landing in a specific project month."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    year: int  # 1-based project year
    month: int  # 1..12 within that year
    amount: float


class CalculatorState(BaseModel):
    """Fully specified input snapshot for a single simulation run.

    No range checks happen here; see ``schemas.calculator`` for the form limits.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: CalculatorMode
    monthlyInvestment: float = 0.0
    lumpsumInvestment: float = 0.0
    annualInterestRate: float = 0.0
    inflationRate: float = 0.0
    durationYears: int
    stepUpAmount: float = 0.0
    stepUpFrequency: StepUpFrequency = StepUpFrequency.YEARLY
    additionalLumpsums: Tuple[LumpsumInjection, ...] = ()
    targetAmount: Optional[float] = None


class MonthlyDataPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    monthIndex: int = Field(ge=1)
    year: int
    invested: float
    value: float
    realValue: float
    installment: float  # recurring installment for this month, injections excluded


class YearlyResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    investedAmount: float
    interestEarned: float
    totalValue: float
    realValue: float


class GoalAchievement(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    month: int


class CalculationResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    totalInvested: float
    totalWealth: float
    totalRealWealth: float
    totalGain: float
    monthlyData: Tuple[MonthlyDataPoint, ...] = ()
    yearlyBreakdown: Tuple[YearlyResult, ...] = ()
    goalAchievedMonth: Optional[GoalAchievement] = None
