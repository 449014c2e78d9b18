"""Application factory and app-wide configuration."""

#setup: pip install -e ".[test]"
#setup: flask --app growthstack.app run --port 5000 --debug

import json
import logging
from typing import Optional

import click
from flask import Flask
from flask_cors import CORS
from pydantic import ValidationError

from growthstack.app.api.routes import api_bp
from growthstack.config import Settings, get_settings
from growthstack.core.report import to_report
from growthstack.core.simulation import simulate
from growthstack.schemas.calculator import DEFAULT_REQUEST, CalculatorRequest


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = Flask(__name__)
    app.config["GROWTHSTACK_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")

    @app.cli.command("report")
    @click.argument("payload", type=click.File("r"), default="-")
    def report_command(payload) -> None:
        """Print the text report for a JSON calculator request (stdin by default)."""
        raw = payload.read().strip()
        try:
            calc_request = CalculatorRequest.model_validate(json.loads(raw)) if raw else DEFAULT_REQUEST
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"not valid JSON: {exc}", param_hint="PAYLOAD") from exc
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'request'}: {error['msg']}"
                for error in exc.errors(include_url=False)
            )
            raise click.BadParameter(problems, param_hint="PAYLOAD") from exc
        click.echo(to_report(simulate(calc_request.to_state()), title=settings.report_title), nl=False)

    return app
