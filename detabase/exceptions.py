"""
Custom exceptions for Deta Base operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import httpx


class DetabaseClientError(Exception):
    """Base exception for detabase operations."""

    pass


class DetabaseError(DetabaseClientError):
    """Non 2xx HTTP status code received from Deta Base.

    Sub-cases (not found, conflict, validation) are told apart by
    ``status_code``, not by distinct exception types.
    """

    def __init__(self, response: httpx.Response, errors: list[str] | None = None):
        """
        Initialize error from a failed response.

        Args:
            response: The HTTP response that triggered the error
            errors: Error messages from the response body's ``errors`` field
        """
        self.response = response
        self.errors: list[str] = list(errors) if errors else []
        message = f"non 2xx http status code received: {response.status_code}"
        if self.errors:
            message += f" ({'; '.join(str(e) for e in self.errors)})"
        super().__init__(message)

    @property
    def status_code(self) -> int:
        """HTTP status code of the carried response."""
        return self.response.status_code


class ConfigError(DetabaseClientError):
    """Required configuration (project id, base name, API key) is missing."""

    pass
