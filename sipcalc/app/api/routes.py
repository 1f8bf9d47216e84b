"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from sipcalc.config import AppSettings
from sipcalc.core.constraints import DEFAULT_PLAN, INPUT_CONSTRAINTS, prepare_plan
from sipcalc.core.ping import build_ping_response
from sipcalc.core.presentation import chart_series, summary_cards
from sipcalc.core.projection import compute_projection
from sipcalc.schemas.projection import (
    ChartResponse,
    DefaultsResponse,
    ProjectionRequest,
    ProjectionResult,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> AppSettings:
    return current_app.config["SIPCALC_SETTINGS"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected projection payload: %d error(s)", exc.error_count())
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _run_projection() -> ProjectionResult:
    settings = _settings()
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)

    plan = prepare_plan(payload.to_plan(), clamp_inputs=settings.clamp_inputs)
    clamp_gains = (
        payload.clamp_gains_at_zero
        if payload.clamp_gains_at_zero is not None
        else settings.clamp_gains_at_zero
    )
    logger.info(
        "projecting %s plan over %d years",
        plan.investment_type.value,
        plan.duration_years,
    )
    return compute_projection(plan, clamp_gains_at_zero=clamp_gains)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = build_ping_response(_settings().service_name)
    return jsonify(response.model_dump())


@api_bp.get("/calc/defaults")
def defaults() -> Any:
    """Starting plan and slider ranges for a fresh calculator."""
    response = DefaultsResponse(plan=DEFAULT_PLAN, constraints=INPUT_CONSTRAINTS)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Totals and yearly timeline for the posted plan."""
    result = _run_projection()
    return jsonify(result.model_dump())


@api_bp.post("/calc/projection/chart")
def projection_chart() -> Any:
    """Summary cards and chart series for the posted plan."""
    result = _run_projection()
    response = ChartResponse(cards=summary_cards(result), chart=chart_series(result))
    return jsonify(response.model_dump())
