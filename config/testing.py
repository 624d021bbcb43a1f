"""
Testing Configuration

Isolates tests from whatever credentials the developer has exported.
"""

from config.default import DefaultConfig


class TestingConfig(DefaultConfig):
    """Configuration used by the test suite."""

    TESTING: bool = True
    DEBUG: bool = False
    SECRET_KEY: str = 'testing-secret-key'

    PROJECT_ID: str | None = 'test-project'
    PROCESSOR_ID: str | None = 'test-processor'
    DOCUMENTAI_LOCATION: str = 'us'
    VERTEX_LOCATION: str = 'us-central1'
    VERTEX_MODEL: str = 'gemini-2.5-flash-lite'
    CORS_ORIGIN: str = 'https://new-project-three-flax.vercel.app'
    STORAGE_MODE: str = 'memory'

    CREDENTIALS_SOURCE: str = 'auto'
    CREDENTIALS_FILE: str | None = None
    GOOGLE_CREDENTIALS: str | None = None
    CLIENT_EMAIL: str | None = None
    PRIVATE_KEY: str | None = None
    PRIVATE_KEY_ID: str | None = None

    UPSTREAM_TIMEOUT_SECONDS: int = 5
