"""Exceptions raised around the matching core and turned into error payloads by the handler."""
from __future__ import annotations


class JobMatchError(Exception):
    """Base error; ``status`` is the HTTP status the handler answers with."""

    status: int = 500
    public_message: str = "Failed to fetch jobs"

    def __init__(self, message: str = "", details: str = "") -> None:
        super().__init__(message or self.public_message)
        self.details = details

    def to_payload(self) -> dict[str, str]:
        payload = {"error": self.public_message}
        if self.details:
            payload["details"] = self.details
        return payload


class MissingCredentialsError(JobMatchError):
    status = 500
    public_message = "Missing ADZUNA_APP_ID or ADZUNA_APP_KEY"


class ProviderError(JobMatchError):
    """The job-search provider was unreachable or answered with a non-success status."""

    status = 502
    public_message = "Adzuna request failed"
