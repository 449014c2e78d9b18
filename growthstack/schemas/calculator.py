"""Data contracts for the calculator endpoints."""

import secrets
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from growthstack.models import (
    CalculationResult,
    CalculatorMode,
    CalculatorState,
    LumpsumInjection,
    StepUpFrequency,
)

AMOUNT_LIMIT = 100_000_000  # 10 Cr


def _new_injection_id() -> str:
    return secrets.token_hex(5)


class InjectionRequest(BaseModel):
    """An extra one-time contribution as entered on the form."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=_new_injection_id)
    year: int = Field(..., ge=1, description="1-based project year.")
    month: int = Field(..., ge=1, le=12, description="Month within that year.")
    amount: float = Field(..., ge=0, le=AMOUNT_LIMIT)


class CalculatorRequest(BaseModel):
    """Inputs required to run a projection, checked against the form limits."""

    model_config = ConfigDict(extra="forbid")

    mode: CalculatorMode = CalculatorMode.SIP
    monthlyInvestment: float = Field(0.0, ge=0, le=AMOUNT_LIMIT)
    lumpsumInvestment: float = Field(0.0, ge=0, le=AMOUNT_LIMIT)
    annualInterestRate: float = Field(
        ...,
        ge=0,
        le=50,
        description="Expected annual return in percent (12 means 12%).",
    )
    inflationRate: float = Field(0.0, ge=0, le=50, description="Annual inflation in percent.")
    durationYears: int = Field(..., ge=1, le=50)
    stepUpAmount: float = Field(0.0, ge=0, le=AMOUNT_LIMIT)
    stepUpFrequency: StepUpFrequency = StepUpFrequency.YEARLY
    additionalLumpsums: List[InjectionRequest] = Field(default_factory=list)
    targetAmount: Optional[float] = Field(None, ge=0)

    @model_validator(mode="after")
    def ensure_unique_injection_ids(self) -> "CalculatorRequest":
        seen = set()
        duplicates = set()
        for injection in self.additionalLumpsums:
            if injection.id in seen:
                duplicates.add(injection.id)
            seen.add(injection.id)
        if duplicates:
            raise ValueError(f"duplicate injection ids: {', '.join(sorted(duplicates))}")
        return self

    def to_state(self) -> CalculatorState:
        return CalculatorState(
            mode=self.mode,
            monthlyInvestment=self.monthlyInvestment,
            lumpsumInvestment=self.lumpsumInvestment,
            annualInterestRate=self.annualInterestRate,
            inflationRate=self.inflationRate,
            durationYears=self.durationYears,
            stepUpAmount=self.stepUpAmount,
            stepUpFrequency=self.stepUpFrequency,
            additionalLumpsums=tuple(
                LumpsumInjection(**injection.model_dump()) for injection in self.additionalLumpsums
            ),
            targetAmount=self.targetAmount,
        )


DEFAULT_REQUEST = CalculatorRequest(
    mode=CalculatorMode.STEP_UP,
    monthlyInvestment=10000,
    lumpsumInvestment=100000,
    annualInterestRate=12,
    durationYears=10,
    stepUpAmount=1000,
    stepUpFrequency=StepUpFrequency.YEARLY,
)


class CalculationResponse(CalculationResult):
    """Projection returned to the front end, with rupee strings for the summary."""

    display: Dict[str, str] = Field(default_factory=dict)
