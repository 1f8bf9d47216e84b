"""Ping utility used by the API health-check."""

from sipcalc import __version__
from sipcalc.schemas.ping import PingResponse


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def build_ping_response(service_name: str) -> PingResponse:
    return PingResponse(message=get_ping_message(), service=service_name, version=__version__)
