"""Gemini generateContent client.

## Library Usage

Uses `requests` against the public REST endpoint
(`/models/{model}:generateContent`). Each demo issues exactly one call:
there is no retry loop here, timeouts are whatever `requests` enforces
for the configured value.

## Data Flow

1. Demo builds a user prompt and a system instruction
2. generate_content() sends one role-tagged message
3. The text at candidates[0].content.parts[0].text is returned
4. A response without that text yields None, not an exception
"""

from typing import Any, Optional

import requests

from src.config import GEMINI_BASE_URL, GEMINI_MODEL, GEMINI_TIMEOUT, GOOGLE_API_KEY
from src.shared.files import setup_logging

logger = setup_logging(__name__)


class GeminiError(Exception):
    """Base exception for Gemini API errors."""
    pass


class APIError(GeminiError):
    """Raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")


def build_payload(prompt: str, system_instruction: Optional[str] = None) -> dict[str, Any]:
    """Build the generateContent request body.

    Example:
        >>> build_payload("Hi")
        {'contents': [{'role': 'user', 'parts': [{'text': 'Hi'}]}]}
    """
    payload: dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
    }
    if system_instruction:
        payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
    return payload


def extract_response_text(result: Any) -> Optional[str]:
    """Return the first candidate's first text part, or None.

    Any missing level (no candidates, empty parts, non-dict nodes, empty text)
    counts as "no usable content".
    """
    try:
        text = result["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text


def generate_content(
    prompt: str,
    system_instruction: Optional[str] = None,
    model: str = GEMINI_MODEL,
    api_key: Optional[str] = None,
    timeout: int = GEMINI_TIMEOUT,
) -> Optional[str]:
    """Send a single prompt to Gemini and return the raw response text.

    Args:
        prompt: User prompt text.
        system_instruction: Optional system instruction.
        model: Gemini model ID (e.g., "gemini-1.5-flash").
        api_key: Overrides GOOGLE_API_KEY from config.
        timeout: Request timeout in seconds.

    Returns:
        The model's text, or None when the response carries no text.

    Raises:
        GeminiError: If the key is missing, the request fails, or the
            body is not JSON.
        APIError: If the API returns a non-200 status.
    """
    key = api_key or GOOGLE_API_KEY
    if not key:
        raise GeminiError("GOOGLE_API_KEY not set in environment")

    url = f"{GEMINI_BASE_URL}/models/{model}:generateContent"
    headers = {
        "x-goog-api-key": key,
        "Content-Type": "application/json",
    }
    payload = build_payload(prompt, system_instruction)

    try:
        response = requests.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise GeminiError(f"Request failed: {exc}") from exc

    if response.status_code != 200:
        try:
            error_detail = response.json().get("error", {}).get("message", response.text)
        except (ValueError, AttributeError):
            error_detail = response.text
        raise APIError(response.status_code, error_detail)

    try:
        result = response.json()
    except ValueError as exc:
        raise GeminiError(f"Response body is not JSON: {exc}") from exc

    text = extract_response_text(result)
    if text is None:
        logger.warning(f"Unexpected response format from Gemini: {result}")
        return None

    chars_in = len(prompt) + len(system_instruction or "")
    logger.info(f"[LLM] model={model} chars_in={chars_in} chars_out={len(text)}")

    return text
