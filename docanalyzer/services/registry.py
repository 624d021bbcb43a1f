"""
Service Registry

Builds the process-wide services once at startup and attaches them to the
Flask app. Nothing here is mutated after create_app returns.
"""

from dataclasses import dataclass
from typing import Optional

from flask import current_app

from docanalyzer.services.ai_service import GenerationClient
from docanalyzer.services.analyzer import DocumentAnalyzer, PromptTemplates
from docanalyzer.services.credentials import build_google_credentials, load_identity
from docanalyzer.services.extraction_service import ExtractionClient
from docanalyzer.services.storage import create_storage
from docanalyzer.utils.logging_utils import get_logger

logger = get_logger(__name__)

EXTENSION_KEY = "docanalyzer"


@dataclass(frozen=True)
class AnalyzerServices:
    project_id: Optional[str]
    model_name: str
    analyzer: DocumentAnalyzer


def build_services(config, extraction_client=None, generation_client=None) -> AnalyzerServices:
    """
    Resolve credentials and construct the remote clients.

    Pre-built clients may be passed in; otherwise they are created only when
    credentials resolved and the project and processor ids are known.
    """
    identity = load_identity(config)
    google_credentials = build_google_credentials(identity) if identity is not None else None

    project_id = config.get("PROJECT_ID") or (identity.project_id if identity else None)
    processor_id = config.get("PROCESSOR_ID")
    model_name = config.get("VERTEX_MODEL")
    timeout = config.get("UPSTREAM_TIMEOUT_SECONDS") or None

    if google_credentials is not None and (extraction_client is None or generation_client is None):
        if not project_id or not processor_id:
            logger.warning("PROJECT_ID or PROCESSOR_ID not configured - document services will be unavailable")
        else:
            if extraction_client is None:
                extraction_client = ExtractionClient(
                    project_id,
                    config.get("DOCUMENTAI_LOCATION"),
                    processor_id,
                    credentials=google_credentials,
                    timeout=timeout,
                )
            if generation_client is None:
                generation_client = GenerationClient(
                    project_id,
                    config.get("VERTEX_LOCATION"),
                    model_name,
                    credentials=google_credentials,
                    timeout=timeout,
                )
            logger.info(f"Document services initialized for project {project_id}, model {model_name}")

    storage = create_storage(config.get("STORAGE_MODE"), config.get("TEMP_PROCESSING_FOLDER"))
    logger.info(f"Upload storage mode: {storage.name}")

    analyzer = DocumentAnalyzer(
        extraction_client,
        generation_client,
        storage,
        PromptTemplates(
            summary=config.get("SUMMARY_PROMPT"),
            key_terms=config.get("KEY_TERMS_PROMPT"),
            risk_assessment=config.get("RISK_ASSESSMENT_PROMPT"),
        ),
        temperature=config.get("TEMPERATURE"),
        max_output_tokens=config.get("MAX_OUTPUT_TOKENS"),
    )
    return AnalyzerServices(
        project_id=project_id,
        model_name=model_name,
        analyzer=analyzer,
    )


def init_services(app, services: Optional[AnalyzerServices] = None):
    """Attach services to the app, building them from app.config if not given."""
    if services is None:
        services = build_services(app.config)
    app.extensions[EXTENSION_KEY] = services
    if not services.analyzer.is_configured:
        logger.warning("Uploads will be rejected until credentials and processor settings are fixed")
    return services


def get_services() -> AnalyzerServices:
    """Services attached to the current app by init_services."""
    return current_app.extensions[EXTENSION_KEY]
