"""Gateway error taxonomy. Each error knows its HTTP status and JSON body."""

from typing import Any


class GatewayError(Exception):
    """Base error rendered as a JSON response by the API."""

    status_code = 500
    error = "Server error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message}


class UnknownLocationError(GatewayError):
    """Location code is not in the configured table."""

    status_code = 400
    error = "Invalid location code"

    def __init__(self, code: str, supported_locations: list[str]):
        super().__init__(f"Location code '{code}' is not defined or not supported.")
        self.code = code
        self.supported_locations = supported_locations

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["supported_locations"] = list(self.supported_locations)
        return body


class MissingCredentialError(GatewayError):
    """No CWA API key configured."""

    status_code = 500
    error = "Server configuration error"

    def __init__(self, message: str = "Set CWA_API_KEY in the environment or config file"):
        super().__init__(message)


class UpstreamError(GatewayError):
    """CWA responded with an HTTP error status."""

    error = "CWA API error"

    def __init__(self, status_code: int, details: Any, message: str | None = None):
        super().__init__(message or "Unable to fetch weather data", status_code)
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["details"] = self.details
        return body


class ForecastDataNotFoundError(GatewayError):
    """CWA answered successfully but had no entry for the region."""

    status_code = 404
    error = "No data found"

    def __init__(self, region: str):
        super().__init__(f"Unable to get weather data for {region}")
        self.region = region


class UpstreamTransportError(GatewayError):
    """Request to CWA never produced a response."""

    status_code = 500
    error = "Server error"

    def __init__(self, message: str = "Unable to fetch weather data, please try again later"):
        super().__init__(message)


class ForecastUnavailableError(UpstreamTransportError):
    """Unexpected failure while building a forecast."""
