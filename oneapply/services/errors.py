from __future__ import annotations

from typing import Any


class JobSearchError(RuntimeError):
    """Terminal failure of a single request; carries the HTTP-facing payload."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, details: str, *, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(details)
        self.details = details
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "details": self.details}
        if self.message:
            payload["message"] = self.message
        return payload


class InvalidRequest(JobSearchError):
    status_code = 400
    error = "Invalid request"

    def __init__(self, details: str, *, error: str | None = None) -> None:
        super().__init__(details)
        if error:
            self.error = error


class ProfileNotFound(JobSearchError):
    status_code = 404
    error = "User not found"

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No user profile found for userId: {user_id}")
        self.user_id = user_id


class UpstreamUnavailable(JobSearchError):
    """A dependency call raised before producing a response."""

    def __init__(self, dependency: str, details: str, *, error: str, status_code: int = 500) -> None:
        super().__init__(details, status_code=status_code)
        self.dependency = dependency
        self.error = error


class UpstreamError(JobSearchError):
    """The listings API answered with a non-success status."""

    def __init__(self, upstream_status: int, body: str) -> None:
        super().__init__(
            body,
            message="Failed to fetch jobs from external API",
            status_code=upstream_status,
        )
        self.upstream_status = upstream_status
        self.error = f"JSearch API request failed: {upstream_status}"


class ConfigurationError(JobSearchError):
    status_code = 500
    error = "API key not configured"


class InternalError(JobSearchError):
    status_code = 500
    error = "Internal server error"

    def __init__(self) -> None:
        super().__init__("An unexpected error occurred while searching for jobs")
