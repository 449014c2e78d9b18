"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from growthstack import __version__
from growthstack.core.currency import summary_display
from growthstack.core.report import to_report
from growthstack.core.simulation import SimulationDomainError, simulate
from growthstack.schemas.calculator import (
    DEFAULT_REQUEST,
    CalculationResponse,
    CalculatorRequest,
)
from growthstack.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info(f"Rejected calculator payload: {exc.error_count()} error(s)")
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(SimulationDomainError)
def _handle_domain_error(exc: SimulationDomainError):
    logger.warning(f"Simulation rejected: {exc}")
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"error": exc.description}), HTTPStatus.BAD_REQUEST


def _read_request() -> CalculatorRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return CalculatorRequest.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Form values the calculator starts from (and resets to)."""
    return jsonify(DEFAULT_REQUEST.model_dump(mode="json"))


@api_bp.post("/calculate")
def calculate() -> Any:
    """Run the projection and return the full time series."""
    payload = _read_request()
    result = simulate(payload.to_state())
    logger.debug(
        f"Simulated {len(result.monthlyData)} months in {payload.mode.value} mode, "
        f"wealth={result.totalWealth:.2f}"
    )
    response = CalculationResponse.model_validate(
        {**result.model_dump(), "display": summary_display(result)}
    )
    return jsonify(response.model_dump())


@api_bp.post("/report")
def report() -> Response:
    """Run the projection and return it as a downloadable text report."""
    settings = current_app.config["GROWTHSTACK_SETTINGS"]
    payload = _read_request()
    text = to_report(simulate(payload.to_state()), title=settings.report_title)
    return Response(
        text,
        status=HTTPStatus.OK,
        content_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{settings.report_filename}"'},
    )
