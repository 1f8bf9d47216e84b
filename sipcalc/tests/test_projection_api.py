from __future__ import annotations

import math

import pytest
from flask.testing import FlaskClient

from sipcalc.app import create_app
from sipcalc.config import AppSettings


def projection_payload() -> dict:
    return {
        "investment_type": "sip",
        "periodic_amount": 5000,
        "one_time_amount": 100000,
        "duration_years": 10,
        "annual_return_rate_percent": 12,
        "annual_inflation_rate_percent": 5,
        "capital_gains_tax_rate_percent": 12.5,
    }


def test_projection_endpoint_returns_totals_and_timeline(client: FlaskClient):
    resp = client.post("/api/calc/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == {
        "total_contributed",
        "gross_returns",
        "post_tax_returns",
        "real_returns",
        "timeline",
    }
    # sip selected, so the one-time amount is ignored
    assert body["total_contributed"] == 600000
    assert body["gross_returns"] == pytest.approx(1161695, abs=1)
    assert len(body["timeline"]) == 10
    assert body["timeline"][-1]["year"] == 10


def test_lumpsum_projection_ignores_periodic_amount(client: FlaskClient):
    payload = projection_payload() | {"investment_type": "lumpsum"}

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total_contributed"] == 100000
    assert body["gross_returns"] == pytest.approx(310585, abs=1)


def test_out_of_range_values_are_clamped(client: FlaskClient):
    payload = projection_payload() | {"duration_years": 90}

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 200
    assert len(resp.get_json()["timeline"]) == 40


def test_zero_rate_without_clamping_is_linear():
    app = create_app(AppSettings(_env_file=None, clamp_inputs=False))
    payload = projection_payload() | {"annual_return_rate_percent": 0}

    with app.test_client() as client:
        resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 200
    timeline = resp.get_json()["timeline"]
    assert [row["gross_value"] for row in timeline] == [5000 * 12 * year for year in range(1, 11)]


def test_chart_endpoint_returns_cards_and_series(client: FlaskClient):
    resp = client.post("/api/calc/projection/chart", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["cards"][0]["formatted"] == "₹6,00,000"
    assert body["chart"]["labels"][0] == "Year 1"
    assert len(body["chart"]["datasets"]) == 4


def test_defaults_endpoint_lists_plan_and_constraints(client: FlaskClient):
    resp = client.get("/api/calc/defaults")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["plan"]["investment_type"] == "sip"
    assert body["constraints"]["duration_years"] == {"min": 1, "max": 40}


def test_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/projection", json={"duration_years": 0})

    assert resp.status_code == 422
    body = resp.get_json()
    assert "detail" in body
    assert {tuple(error["loc"]) for error in body["detail"]} >= {
        ("duration_years",),
        ("annual_return_rate_percent",),
    }


def test_unknown_fields_are_rejected(client: FlaskClient):
    payload = projection_payload() | {"currency": "USD"}

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 422


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/calc/projection",
        data="{not json",
        content_type="application/json",
    )

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_request_can_set_gains_policy(client: FlaskClient):
    payload = projection_payload() | {"clamp_gains_at_zero": True}

    resp = client.post("/api/calc/projection", json=payload)
    default_resp = client.post("/api/calc/projection", json=projection_payload())

    assert resp.status_code == 200
    # gains are positive here, so the policy leaves the numbers unchanged
    assert resp.get_json() == default_resp.get_json()


def test_unclamped_request_above_hard_ceiling_returns_422():
    app = create_app(AppSettings(_env_file=None, clamp_inputs=False))
    payload = projection_payload() | {
        "periodic_amount": 100,
        "duration_years": 40,
        "annual_return_rate_percent": 100000,
    }

    with app.test_client() as client:
        resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 422
    locs = {tuple(error["loc"]) for error in resp.get_json()["detail"]}
    assert ("annual_return_rate_percent",) in locs


def test_unclamped_request_at_hard_ceiling_stays_finite():
    app = create_app(AppSettings(_env_file=None, clamp_inputs=False))
    payload = projection_payload() | {
        "duration_years": 100,
        "annual_return_rate_percent": 100,
        "annual_inflation_rate_percent": 100,
        "capital_gains_tax_rate_percent": 100,
    }

    with app.test_client() as client:
        resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["timeline"]) == 100
    assert math.isfinite(body["gross_returns"])
    assert math.isfinite(body["real_returns"])


def test_duration_above_hard_ceiling_is_rejected(client: FlaskClient):
    payload = projection_payload() | {"duration_years": 5_000_000}

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 422
