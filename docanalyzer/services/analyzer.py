"""
Document Analyzer

Drives one upload through extraction and the three generation prompts:
summary, key terms and risk assessment. Steps run strictly in order and
the first failure ends the request.
"""

from dataclasses import dataclass

from docanalyzer.errors import ClientInputError, ServerMisconfiguration
from docanalyzer.models import AnalysisResponse
from docanalyzer.services.ai_service import DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_TEMPERATURE
from docanalyzer.utils.logging_utils import RequestTimer, get_logger, get_trace_id, log_request_summary

logger = get_logger(__name__)

EMPTY_TEXT_MESSAGE = "Document contained no extractable text."

SUMMARY_FALLBACK = "Summary not generated"
KEY_TERMS_FALLBACK = "Key terms not extracted"
RISK_ASSESSMENT_FALLBACK = "Risk assessment not generated"


@dataclass(frozen=True)
class PromptTemplates:
    summary: str
    key_terms: str
    risk_assessment: str

    @staticmethod
    def render(template: str, text: str) -> str:
        return template.replace("{text}", text)


class DocumentAnalyzer:

    def __init__(self, extraction_client, generation_client, storage, prompts: PromptTemplates,
                 temperature: float = DEFAULT_TEMPERATURE,
                 max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS):
        self.extraction_client = extraction_client
        self.generation_client = generation_client
        self.storage = storage
        self.prompts = prompts
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    @property
    def is_configured(self) -> bool:
        return self.extraction_client is not None and self.generation_client is not None

    def analyze(self, file_storage) -> AnalysisResponse:
        """Run the full pipeline for one uploaded file."""
        if not self.is_configured:
            logger.error("Upload rejected: credentials or remote clients are not initialized")
            raise ServerMisconfiguration()

        timer = RequestTimer()
        summary_data = {"trace_id": get_trace_id(), "analysis_status": "in_progress"}
        try:
            timer.start_step("extraction")
            with self.storage.stage(file_storage) as upload:
                summary_data.update(filename=upload.filename, mime_type=upload.mime_type, file_size=upload.size)
                logger.info(f"Extracting text from {upload.filename} ({upload.size} bytes, {upload.mime_type})")
                extraction = self.extraction_client.extract(upload.content, upload.mime_type)
            timer.end_step()

            text = extraction.text
            summary_data["extracted_chars"] = len(text)
            if extraction.is_empty:
                logger.warning("Extraction succeeded but returned no text")
                summary_data["analysis_status"] = "empty_text"
                raise ClientInputError(EMPTY_TEXT_MESSAGE)

            timer.start_step("summary")
            summary = self._generate("summary", self.prompts.summary, text, SUMMARY_FALLBACK)
            timer.start_step("key_terms")
            key_terms = self._generate("key_terms", self.prompts.key_terms, text, KEY_TERMS_FALLBACK)
            timer.start_step("risk_assessment")
            risk_assessment = self._generate(
                "risk_assessment", self.prompts.risk_assessment, text, RISK_ASSESSMENT_FALLBACK
            )
            timer.end_step()

            summary_data["analysis_status"] = "success"
            return AnalysisResponse(
                text=text,
                summary=summary,
                key_terms=key_terms,
                risk_assessment=risk_assessment,
            )
        except Exception as e:
            if summary_data["analysis_status"] == "in_progress":
                summary_data["analysis_status"] = f"error: {type(e).__name__}"
            raise
        finally:
            timing_summary = timer.get_summary()
            summary_data["total_time"] = timing_summary["total_time_seconds"]
            summary_data["step_times"] = timing_summary["steps"]
            log_request_summary(logger, summary_data)

    def _generate(self, step: str, template: str, text: str, fallback: str) -> str:
        return self.generation_client.generate(
            PromptTemplates.render(template, text),
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            fallback=fallback,
            step=step,
        )
