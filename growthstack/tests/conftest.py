from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from growthstack.app import create_app
from growthstack.config import Settings
from growthstack.models import CalculatorMode, CalculatorState


@pytest.fixture()
def app():
    return create_app(Settings(report_title="Test Report", report_filename="test_report.csv"))


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def make_state():
    """Build a CalculatorState with zeroed defaults, overriding only what a test cares about."""

    def _make(**overrides) -> CalculatorState:
        values = {
            "mode": CalculatorMode.SIP,
            "monthlyInvestment": 0.0,
            "lumpsumInvestment": 0.0,
            "annualInterestRate": 0.0,
            "durationYears": 1,
        }
        values.update(overrides)
        return CalculatorState(**values)

    return _make
