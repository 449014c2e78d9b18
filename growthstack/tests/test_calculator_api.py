from __future__ import annotations

import json
from math import isclose

from flask.testing import FlaskClient

from growthstack.core.simulation import SimulationDomainError


def calculator_payload() -> dict:
    return {
        "mode": "LUMPSUM",
        "lumpsumInvestment": 100000,
        "annualInterestRate": 12,
        "durationYears": 1,
    }


def test_calculate_returns_full_projection(client: FlaskClient):
    resp = client.post("/api/calculate", json=calculator_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert isclose(body["totalInvested"], 100000.0, abs_tol=0.0)
    assert isclose(body["totalWealth"], 112682.50, abs_tol=0.01)
    assert len(body["monthlyData"]) == 12
    assert body["monthlyData"][0]["monthIndex"] == 1
    assert len(body["yearlyBreakdown"]) == 1
    assert body["goalAchievedMonth"] is None


def test_calculate_reports_goal_and_injections(client: FlaskClient):
    payload = {
        "mode": "SIP",
        "monthlyInvestment": 1000,
        "annualInterestRate": 0,
        "durationYears": 1,
        "targetAmount": 10000,
        "additionalLumpsums": [
            {"year": 1, "month": 2, "amount": 3000},
            {"id": "late", "year": 2, "month": 5, "amount": 50000},
        ],
    }

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["totalInvested"] == 15000.0
    # 1000, 5000, 6000, 7000, 8000, 9000, 10000 -> month 7
    assert body["goalAchievedMonth"] == {"year": 1, "month": 7}


def test_out_of_range_rate_returns_422(client: FlaskClient):
    payload = calculator_payload()
    payload["annualInterestRate"] = 60

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 422
    body = resp.get_json()
    assert any(error["loc"] == ["annualInterestRate"] for error in body["detail"])


def test_zero_duration_is_rejected_by_the_form_layer(client: FlaskClient):
    payload = calculator_payload()
    payload["durationYears"] = 0

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 422


def test_duplicate_injection_ids_return_422(client: FlaskClient):
    payload = calculator_payload()
    payload["additionalLumpsums"] = [
        {"id": "same", "year": 1, "month": 1, "amount": 10},
        {"id": "same", "year": 1, "month": 2, "amount": 10},
    ]

    resp = client.post("/api/calculate", json=payload)

    assert resp.status_code == 422
    assert "duplicate" in json.dumps(resp.get_json())


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post("/api/calculate", data="{not json", content_type="application/json")

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_report_is_served_as_csv_attachment(client: FlaskClient):
    resp = client.post("/api/report", json=calculator_payload())

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "test_report.csv" in resp.headers["Content-Disposition"]
    text = resp.get_data(as_text=True)
    assert text.splitlines()[0] == "Test Report"
    assert "SUMMARY\nTotal Invested,Total Wealth,Total Real Wealth,Total Gain\n100000,112683,112683,12683\n" in text


def test_defaults_match_the_starting_form(client: FlaskClient):
    resp = client.get("/api/defaults")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["mode"] == "STEP_UP"
    assert body["monthlyInvestment"] == 10000
    assert body["durationYears"] == 10
    assert body["stepUpFrequency"] == "YEARLY"
    assert body["additionalLumpsums"] == []

    # the defaults are themselves a valid request
    assert client.post("/api/calculate", json=body).status_code == 200


def test_cors_allows_local_front_end(client: FlaskClient):
    resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_report_cli_prints_report(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["report"], input=json.dumps(calculator_payload()))

    assert result.exit_code == 0
    assert result.output.startswith("Test Report\n\nSUMMARY\n")


def test_report_cli_falls_back_to_defaults(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["report"], input="")

    assert result.exit_code == 0
    monthly = result.output.rstrip("\n").split("\n\n")[-1].splitlines()
    assert len(monthly) == 2 + 120


def test_calculate_includes_rupee_display_strings(client: FlaskClient):
    resp = client.post("/api/calculate", json=calculator_payload())

    display = resp.get_json()["display"]
    assert display["totalInvested"] == "₹1,00,000"
    assert display["totalWealth"] == "₹1,12,683"
    assert display["totalGain"] == "₹12,683"
    assert display["totalWealthCompact"] == "₹1.1L"


def test_domain_error_from_engine_returns_400(client: FlaskClient, monkeypatch):
    def reject(state):
        raise SimulationDomainError("inflationRate must be greater than -100%, got -120.0%")

    monkeypatch.setattr("growthstack.app.api.routes.simulate", reject)

    resp = client.post("/api/calculate", json=calculator_payload())

    assert resp.status_code == 400
    assert "inflationRate" in resp.get_json()["error"]


def test_report_cli_rejects_malformed_json(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["report"], input="{bad")

    assert result.exit_code == 2
    assert "not valid JSON" in result.output
    assert "Traceback" not in result.output


def test_report_cli_rejects_out_of_range_request(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["report"], input=json.dumps({"annualInterestRate": 99, "durationYears": 1}))

    assert result.exit_code == 2
    assert "annualInterestRate" in result.output
    assert "less than or equal to 50" in result.output
