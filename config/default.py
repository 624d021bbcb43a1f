"""
Default Configuration

Configuration settings for the Legal Document Analyzer.
Values are read from the environment once, when this module is imported.
"""

import os
import sys
import tempfile


def _load_prompt_from_file(filename: str, default: str = "") -> str:
    """Load prompt from file in prompts/ directory"""
    try:
        prompts_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'prompts')
        filepath = os.path.join(prompts_dir, filename)
        if os.path.exists(filepath):
            with open(filepath, 'r', encoding='utf-8') as f:
                content = f.read().strip()
                return content if content else default
        return default
    except OSError as e:
        print(f"Error loading prompt {filename}: {e}", file=sys.stderr)
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        print(f"Invalid integer for {name}, using {default}", file=sys.stderr)
        return default


DEFAULT_SUMMARY_PROMPT = "Summarize the following legal document:\n\n{text}"

DEFAULT_KEY_TERMS_PROMPT = "Extract key terms and their values in bullet points:\n\n{text}"

DEFAULT_RISK_ASSESSMENT_PROMPT = (
    "Provide a risk assessment in this format:\n"
    "- Risk Item: Description (Severity: Low/Medium/High)\n\n"
    "For this legal document:\n\n{text}"
)


class DefaultConfig:
    """Default configuration settings."""

    SECRET_KEY: str = os.environ.get('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG: bool = os.environ.get('DEBUG', 'False').lower() == 'true'
    TESTING: bool = False

    MAX_CONTENT_LENGTH: int = 16 * 1024 * 1024

    # Only one browser origin may call the API (no trailing slash)
    CORS_ORIGIN: str = os.environ.get('CORS_ORIGIN', 'https://new-project-three-flax.vercel.app')

    # === Google Cloud project ===
    PROJECT_ID: str | None = os.environ.get('PROJECT_ID')
    PROCESSOR_ID: str | None = os.environ.get('PROCESSOR_ID')
    DOCUMENTAI_LOCATION: str = os.environ.get('DOCUMENTAI_LOCATION', 'us')
    VERTEX_LOCATION: str = os.environ.get('VERTEX_LOCATION', 'us-central1')
    VERTEX_MODEL: str = os.environ.get('VERTEX_MODEL', 'gemini-2.5-flash-lite')

    # === Service-account credentials ===
    # auto | file | env | json
    CREDENTIALS_SOURCE: str = os.environ.get('CREDENTIALS_SOURCE', 'auto')
    CREDENTIALS_FILE: str | None = (
        os.environ.get('CREDENTIALS_FILE') or os.environ.get('GOOGLE_APPLICATION_CREDENTIALS')
    )
    GOOGLE_CREDENTIALS: str | None = os.environ.get('GOOGLE_CREDENTIALS')
    CLIENT_EMAIL: str | None = os.environ.get('client_email')
    PRIVATE_KEY: str | None = os.environ.get('private_key')
    PRIVATE_KEY_ID: str | None = os.environ.get('private_key_id')

    # === Generation parameters ===
    TEMPERATURE: float = 0.3
    MAX_OUTPUT_TOKENS: int = 300

    # 0 disables the bound on remote calls
    UPSTREAM_TIMEOUT_SECONDS: int = _int_env('UPSTREAM_TIMEOUT_SECONDS', 120)

    # === Upload staging ===
    # memory | disk
    STORAGE_MODE: str = os.environ.get('STORAGE_MODE', 'memory')
    TEMP_PROCESSING_FOLDER: str = os.environ.get(
        'TEMP_PROCESSING_FOLDER',
        os.path.join(tempfile.gettempdir(), 'docanalyzer_temp', 'processing_files')
    )

    # === PROMPTS - Loaded from prompts/ directory ===
    SUMMARY_PROMPT: str = _load_prompt_from_file('SUMMARY_PROMPT.txt', DEFAULT_SUMMARY_PROMPT)
    KEY_TERMS_PROMPT: str = _load_prompt_from_file('KEY_TERMS_PROMPT.txt', DEFAULT_KEY_TERMS_PROMPT)
    RISK_ASSESSMENT_PROMPT: str = _load_prompt_from_file(
        'RISK_ASSESSMENT_PROMPT.txt',
        DEFAULT_RISK_ASSESSMENT_PROMPT
    )
