from typing import Any, Dict

import httpx


class FloodAlertError(Exception):
    """Base error; terminal for the request that raised it"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(FloodAlertError):
    status_code = 400


class ConfigurationError(FloodAlertError):
    status_code = 500


class UpstreamError(FloodAlertError):
    """A weather or news call failed or returned something unusable"""

    status_code = 500

    def __init__(self, details: Any = None, message: str = "Failed to generate flood alert"):
        super().__init__(message)
        self.details = details

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        if self.details is not None:
            payload["details"] = self.details
        return payload

    @classmethod
    def from_http_error(cls, exc: httpx.HTTPError) -> "UpstreamError":
        """Pass through the upstream error body when there is one"""
        if not isinstance(exc, httpx.HTTPStatusError):
            return cls(str(exc))

        # httpx's own message carries the request URL, query key included
        response = exc.response
        try:
            body = response.json()
        except ValueError:
            body = response.text or None
        if body is None:
            body = f"Request failed with status code {response.status_code}"
        return cls(body)


class FeedParseError(UpstreamError):
    pass
