"""
Analyzer Errors

Exceptions raised while handling an upload. Each carries the HTTP status
and the public message returned to the caller.
"""


class AnalyzerError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code = 500
    message = "An internal error occurred"

    def __init__(self, message: str | None = None, detail: str | None = None):
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)

    def to_dict(self) -> dict:
        payload = {"error": self.message}
        if self.detail:
            payload["detail"] = self.detail
        return payload


class ClientInputError(AnalyzerError):
    """The caller can fix this one: missing file, document without text."""

    status_code = 400
    message = "Bad request"


class ServerMisconfiguration(AnalyzerError):
    """Credentials or remote clients were never initialized."""

    message = "Server misconfiguration: document services are unavailable"


class UpstreamExtractionError(AnalyzerError):
    """The document extraction service call failed."""

    message = "Failed to extract text from document"


class UpstreamGenerationError(AnalyzerError):
    """A generation call failed at the transport or remote level."""

    message = "Failed to analyze document"

    def __init__(self, step: str, detail: str | None = None):
        self.step = step
        super().__init__(detail=f"{step}: {detail}" if detail else step)


class CredentialsError(Exception):
    """Raised by a credential provider when its source cannot be parsed."""
