"""Projection engine and report rendering."""

from growthstack.core.report import parse_summary, to_report
from growthstack.core.simulation import SimulationDomainError, simulate

__all__ = ["SimulationDomainError", "parse_summary", "simulate", "to_report"]
