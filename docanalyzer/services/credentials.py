"""
Credential Providers

Resolve the service-account identity used by Document AI and Vertex AI.
Three sources are supported: a key file on disk, discrete environment
variables, or a single JSON blob. The provider is chosen once at startup.
"""

import json
import os
from typing import Optional

from google.oauth2 import service_account

from docanalyzer.errors import CredentialsError
from docanalyzer.models import ServiceAccountIdentity
from docanalyzer.utils.logging_utils import get_logger, mask_key

logger = get_logger(__name__)

SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]

SOURCE_FILE = "file"
SOURCE_ENV = "env"
SOURCE_JSON = "json"
SOURCE_AUTO = "auto"


def normalize_newlines(value: Optional[str]) -> Optional[str]:
    """Turn literal backslash-n sequences into real newlines."""
    if value is None:
        return None
    return value.replace("\\n", "\n")


def identity_from_info(info: dict, source: str) -> ServiceAccountIdentity:
    if not isinstance(info, dict):
        raise CredentialsError(f"Expected a JSON object, got {type(info).__name__}")
    return ServiceAccountIdentity(
        client_email=info.get("client_email"),
        private_key=info.get("private_key"),
        private_key_id=info.get("private_key_id"),
        project_id=info.get("project_id"),
        source=source,
    )


class KeyFileCredentialProvider:
    """Reads a service-account key file from disk."""

    source = SOURCE_FILE

    def __init__(self, path: str):
        self.path = path

    def load(self) -> ServiceAccountIdentity:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                info = json.load(f)
        except OSError as e:
            raise CredentialsError(f"Cannot read key file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CredentialsError(f"Key file {self.path} is not valid JSON: {e.msg}") from e
        return identity_from_info(info, self.source)


class EnvCredentialProvider:
    """Builds the identity from client_email / private_key / private_key_id."""

    source = SOURCE_ENV

    def __init__(self, client_email: Optional[str], private_key: Optional[str],
                 private_key_id: Optional[str] = None, project_id: Optional[str] = None):
        self.client_email = client_email
        self.private_key = private_key
        self.private_key_id = private_key_id
        self.project_id = project_id

    def load(self) -> ServiceAccountIdentity:
        return ServiceAccountIdentity(
            client_email=self.client_email,
            private_key=normalize_newlines(self.private_key),
            private_key_id=self.private_key_id,
            project_id=self.project_id,
            source=self.source,
        )


class JsonBlobCredentialProvider:
    """
    Parses the GOOGLE_CREDENTIALS blob.

    Shell and CI quoting often mangles the key's newlines, either into
    literal \\n or into raw line breaks, which breaks JSON parsing. A failed
    parse is retried once after normalizing those sequences. A key that
    parsed but still holds literal \\n is normalized as well.
    """

    source = SOURCE_JSON

    def __init__(self, blob: Optional[str]):
        self.blob = blob

    def load(self) -> ServiceAccountIdentity:
        if not self.blob or not self.blob.strip():
            raise CredentialsError("GOOGLE_CREDENTIALS is empty")

        try:
            info = json.loads(self.blob)
        except json.JSONDecodeError as first_error:
            logger.warning(f"GOOGLE_CREDENTIALS did not parse ({first_error.msg}), retrying with normalized newlines")
            try:
                # strict=False accepts the real newlines the normalization introduces inside strings
                info = json.loads(normalize_newlines(self.blob), strict=False)
            except json.JSONDecodeError as e:
                raise CredentialsError(f"GOOGLE_CREDENTIALS is not valid JSON: {e.msg}") from e

        identity = identity_from_info(info, self.source)
        if identity.private_key and "\\n" in identity.private_key:
            identity = identity_from_info(
                {**info, "private_key": normalize_newlines(identity.private_key)},
                self.source
            )
        return identity


def select_provider(config) -> Optional[object]:
    """
    Pick the credential provider named by CREDENTIALS_SOURCE.

    In auto mode the JSON blob wins over discrete variables, which win over
    a key file. Returns None when nothing is configured.
    """
    source = (config.get("CREDENTIALS_SOURCE") or SOURCE_AUTO).lower()
    blob = config.get("GOOGLE_CREDENTIALS")
    client_email = config.get("CLIENT_EMAIL")
    private_key = config.get("PRIVATE_KEY")
    key_file = config.get("CREDENTIALS_FILE")

    if source == SOURCE_AUTO:
        if blob:
            source = SOURCE_JSON
        elif client_email or private_key:
            source = SOURCE_ENV
        elif key_file and os.path.exists(key_file):
            source = SOURCE_FILE
        else:
            return None

    if source == SOURCE_JSON:
        return JsonBlobCredentialProvider(blob)
    if source == SOURCE_ENV:
        return EnvCredentialProvider(
            client_email,
            private_key,
            config.get("PRIVATE_KEY_ID"),
            config.get("PROJECT_ID"),
        )
    if source == SOURCE_FILE:
        if not key_file:
            raise CredentialsError("CREDENTIALS_SOURCE=file but no key file path is configured")
        return KeyFileCredentialProvider(key_file)

    raise CredentialsError(f"Unknown CREDENTIALS_SOURCE: {source}")


def load_identity(config) -> Optional[ServiceAccountIdentity]:
    """
    Resolve the service-account identity, or None when unavailable.

    Missing mandatory fields only produce a warning; startup continues.
    """
    try:
        provider = select_provider(config)
        if provider is None:
            logger.warning("No service-account credentials configured - document services will be unavailable")
            return None
        identity = provider.load()
    except CredentialsError as e:
        logger.error(f"Failed to load service-account credentials: {e}")
        return None

    missing = identity.missing_fields
    if missing:
        logger.warning(f"Service-account credentials from '{identity.source}' are missing fields: {', '.join(missing)}")
    else:
        logger.info(
            f"Service-account credentials loaded from '{identity.source}': "
            f"{identity.client_email} (key id {mask_key(identity.private_key_id)})"
        )
    return identity


def build_google_credentials(identity: ServiceAccountIdentity):
    """Turn the identity into google-auth credentials, or None if it is rejected."""
    try:
        return service_account.Credentials.from_service_account_info(identity.to_info(), scopes=SCOPES)
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"google-auth rejected the service-account credentials: {e}")
        return None
