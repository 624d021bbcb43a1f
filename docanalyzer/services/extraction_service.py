"""
Extraction Service

Google Document AI wrapper: raw document bytes in, plain text out.
"""

import time
from typing import Optional

from google.api_core.client_options import ClientOptions
from google.cloud import documentai

from docanalyzer.errors import UpstreamExtractionError
from docanalyzer.models import ExtractionResult
from docanalyzer.utils.logging_utils import get_logger

logger = get_logger(__name__)


def processor_name(project_id: str, location: str, processor_id: str) -> str:
    """Fully-qualified processor resource name."""
    return documentai.DocumentProcessorServiceClient.processor_path(project_id, location, processor_id)


class ExtractionClient:
    """Sends a document to a Document AI processor and returns its text."""

    def __init__(self, project_id: str, location: str, processor_id: str,
                 credentials=None, timeout: Optional[float] = None, client=None):
        self.location = location
        self.timeout = timeout or None
        self.name = processor_name(project_id, location, processor_id)
        self.client = client or documentai.DocumentProcessorServiceClient(
            credentials=credentials,
            client_options=ClientOptions(api_endpoint=f"{location}-documentai.googleapis.com"),
        )

    def extract(self, content: bytes, mime_type: str) -> ExtractionResult:
        request = documentai.ProcessRequest(
            name=self.name,
            raw_document=documentai.RawDocument(content=content, mime_type=mime_type),
        )

        logger.info(f"Sending {len(content)} bytes ({mime_type}) to {self.name}")
        api_start_time = time.time()
        try:
            result = self.client.process(request=request, timeout=self.timeout)
        except Exception as e:
            logger.error(f"Document AI call failed after {time.time() - api_start_time:.2f}s: {e}")
            raise UpstreamExtractionError(detail=str(e)) from e

        document = getattr(result, "document", None)
        text = (getattr(document, "text", None) or "") if document is not None else ""
        logger.info(f"Document AI returned {len(text)} chars in {time.time() - api_start_time:.2f}s")
        return ExtractionResult(text=text)
