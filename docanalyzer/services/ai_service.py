"""
AI Service for Gemini on Vertex AI.
Each call is a single-turn prompt; nothing is kept between calls.
"""

import time
from typing import Optional

from google import genai
from google.genai import types

from docanalyzer.errors import UpstreamGenerationError
from docanalyzer.utils.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_OUTPUT_TOKENS = 300


def first_candidate_text(response) -> Optional[str]:
    """Return the first candidate's first text part, or None if the shape is off."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        return None
    return getattr(parts[0], "text", None)


def _token_usage(response) -> dict:
    usage = getattr(response, "usage_metadata", None)
    if not usage:
        return {}
    return {
        "input_tokens": getattr(usage, "prompt_token_count", 0),
        "output_tokens": getattr(usage, "candidates_token_count", 0),
        "total_tokens": getattr(usage, "total_token_count", 0),
    }


class GenerationClient:
    """Thin wrapper around google-genai in Vertex AI mode."""

    def __init__(self, project_id: str, location: str, model_name: str,
                 credentials=None, timeout: Optional[float] = None, client=None):
        self.model_name = model_name
        if client is None:
            http_options = types.HttpOptions(timeout=int(timeout * 1000)) if timeout else None
            client = genai.Client(
                vertexai=True,
                project=project_id,
                location=location,
                credentials=credentials,
                http_options=http_options,
            )
        self.client = client

    def generate(self, prompt: str, temperature: float = DEFAULT_TEMPERATURE,
                 max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
                 fallback: str = "", step: str = "generation") -> str:
        """
        Send one user prompt and return the generated text.

        A successful response without the expected candidate/part shape
        yields `fallback`. Transport and remote errors raise
        UpstreamGenerationError tagged with `step`.
        """
        config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        contents = [types.Content(role="user", parts=[types.Part(text=prompt)])]

        logger.info(f"[{step}] Sending prompt to {self.model_name} (length {len(prompt)})")
        api_start_time = time.time()
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.error(f"[{step}] Generation call failed after {time.time() - api_start_time:.2f}s: {e}")
            raise UpstreamGenerationError(step, str(e)) from e

        api_duration = time.time() - api_start_time
        token_usage = _token_usage(response)
        if token_usage:
            logger.info(f"[{step}] Token usage: input={token_usage['input_tokens']}, output={token_usage['output_tokens']}, total={token_usage['total_tokens']}")

        text = first_candidate_text(response)
        if not text:
            logger.warning(f"[{step}] Response had no candidate text after {api_duration:.2f}s, using fallback")
            return fallback

        logger.info(f"[{step}] Received {len(text)} chars in {api_duration:.2f}s")
        return text
