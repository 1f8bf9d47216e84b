from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from sipcalc.app import create_app
from sipcalc.config import AppSettings


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app(AppSettings(_env_file=None))
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
