"""
Data Model

Request-scoped and process-scoped values passed between the services.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class UploadedFile:
    """An uploaded document, staged in memory or in a temporary file."""

    content: bytes
    mime_type: str
    filename: str
    path: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ServiceAccountIdentity:
    """Service-account identity shared by the extraction and generation clients."""

    client_email: Optional[str]
    private_key: Optional[str] = field(default=None, repr=False)
    private_key_id: Optional[str] = None
    project_id: Optional[str] = None
    source: str = "unknown"

    @property
    def missing_fields(self) -> list:
        return [name for name in ("client_email", "private_key") if not getattr(self, name)]

    def to_info(self) -> dict:
        """Return the key-file shaped dict google-auth expects."""
        info = {
            "type": "service_account",
            "token_uri": "https://oauth2.googleapis.com/token",
        }
        for name in ("client_email", "private_key", "private_key_id", "project_id"):
            value = getattr(self, name)
            if value:
                info[name] = value
        return info


@dataclass
class ExtractionResult:
    text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


@dataclass
class AnalysisResponse:
    text: str
    summary: str
    key_terms: str
    risk_assessment: str

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "summary": self.summary,
            "keyTerms": self.key_terms,
            "riskAssessment": self.risk_assessment,
        }
